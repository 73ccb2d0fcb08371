from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from common.svg_builder import SvgBuilder
from klineplot.chart_config import ChartConfig, load_chart
from klineplot.errors import KlinePlotError
from klineplot.plot_types import Color32, Cursor, LineSegment, Pos2, Rect, Shape, Stroke
from klineplot.rulers import PlotConfig
from klineplot.svg_export import add_shapes
from klineplot.transform import PlotTransform

logger = logging.getLogger(__name__)

CURSOR_STROKE = Stroke(1.0, Color32(128, 128, 128, 160))


def cursor_segment(cursor: Cursor, transform: PlotTransform, frame: Rect) -> LineSegment:
    """Turn a ruler cursor into a line across the plot frame."""
    if cursor.kind == "vertical":
        x = transform.position_from_point_x(cursor.value)
        return LineSegment(points=(Pos2(x, frame.min.y), Pos2(x, frame.max.y)), stroke=CURSOR_STROKE)
    y = transform.position_from_point_y(cursor.value)
    return LineSegment(points=(Pos2(frame.min.x, y), Pos2(frame.max.x, y)), stroke=CURSOR_STROKE)


def chart_shapes(config: ChartConfig, highlight: int | None = None) -> list[Shape]:
    elements = config.plot.elements
    if highlight is not None and not 0 <= highlight < len(elements):
        raise KlinePlotError(
            code="E1201_HIGHLIGHT_RANGE",
            message=f"Highlight index {highlight} is out of range for {len(elements)} boxes.",
            hint="Use a zero-based index of a box in the chart file.",
        )
    transform = config.transform()
    shapes = config.plot.shapes(transform, highlighted=highlight)
    if highlight is not None:
        plot_config = PlotConfig(
            transform=transform,
            text_color=config.style.text_color,
            font_size=config.style.font_size,
        )
        text_shapes, cursors = config.plot.rulers(plot_config, highlight)
        frame = config.frame()
        shapes = [cursor_segment(cursor, transform, frame) for cursor in cursors] + shapes + text_shapes
    return shapes


def render_chart(
    chart_path: Path,
    output_svg: Path,
    highlight: int | None = None,
    style_path: Path | None = None,
) -> dict[str, Any]:
    config = load_chart(chart_path, style_path)
    shapes = chart_shapes(config, highlight)
    builder = SvgBuilder.create(width=config.style.width, height=config.style.height)
    if config.style.background:
        builder.add_background(config.style.background)
    if config.style.frame_color:
        frame = config.frame()
        builder.add_frame(frame.min.x, frame.min.y, frame.width, frame.height, stroke=config.style.frame_color)
    add_shapes(builder, shapes)
    builder.save(output_svg)
    logger.info("Rendered %d boxes (%d shapes) to %s", len(config.plot.elements), len(shapes), output_svg)
    bounds = config.resolved_bounds()
    return {
        "output_svg": str(output_svg),
        "boxes": len(config.plot.elements),
        "shapes": len(shapes),
        "bounds": [bounds.min_x, bounds.min_y, bounds.max_x, bounds.max_y],
    }


def describe_chart(chart_path: Path, style_path: Path | None = None) -> list[str]:
    """Default hover text of every box, as the plot would show it."""
    config = load_chart(chart_path, style_path)
    transform = config.transform()
    descriptions = []
    for element in config.plot.elements:
        text = element.default_values_format(transform)
        if element.name:
            text = f"{element.name}\n{text}"
        descriptions.append(text)
    return descriptions
