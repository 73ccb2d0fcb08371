from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterable

from common.svg_builder import SvgBuilder
from klineplot.plot_types import Color32, LineSegment, RectShape, Shape, Stroke, TextShape

logger = logging.getLogger(__name__)


def _paint(color: Color32) -> dict[str, Any]:
    if color.is_transparent():
        return {"value": "none"}
    paint: dict[str, Any] = {"value": color.to_hex()}
    if color.a < 255:
        paint["opacity"] = round(color.opacity, 4)
    return paint


def _stroke_kwargs(stroke: Stroke) -> dict[str, Any]:
    if stroke.is_empty():
        return {"stroke": "none"}
    paint = _paint(stroke.color)
    kwargs: dict[str, Any] = {"stroke": paint["value"], "stroke_width": stroke.width}
    if "opacity" in paint:
        kwargs["stroke_opacity"] = paint["opacity"]
    return kwargs


def _add_rect(builder: SvgBuilder, shape: RectShape, idx: int) -> None:
    rect = shape.rect
    x, y = rect.min.x, rect.min.y
    width, height = rect.width, rect.height
    # SVG strokes straddle the outline; shrink the rect so the stroke stays inside.
    if shape.stroke_kind == "inside" and not shape.stroke.is_empty():
        inset = shape.stroke.width / 2.0
        x, y = x + inset, y + inset
        width, height = max(width - 2 * inset, 0.0), max(height - 2 * inset, 0.0)
    fill = _paint(shape.fill)
    kwargs: dict[str, Any] = {
        "insert": (x, y),
        "size": (width, height),
        "fill": fill["value"],
        "id": f"box_rect_{idx:02d}",
    }
    if "opacity" in fill:
        kwargs["fill_opacity"] = fill["opacity"]
    if shape.corner_radius > 0:
        kwargs["rx"] = shape.corner_radius
        kwargs["ry"] = shape.corner_radius
    kwargs.update(_stroke_kwargs(shape.stroke))
    builder.groups["g_boxes"].add(builder.drawing.rect(**kwargs))


def _add_line(builder: SvgBuilder, shape: LineSegment, idx: int) -> None:
    start, end = shape.points
    kwargs: dict[str, Any] = {
        "start": (start.x, start.y),
        "end": (end.x, end.y),
        "id": f"box_line_{idx:02d}",
    }
    kwargs.update(_stroke_kwargs(shape.stroke))
    builder.groups["g_lines"].add(builder.drawing.line(**kwargs))


def _add_text(builder: SvgBuilder, shape: TextShape, idx: int) -> None:
    builder.add_text(
        shape.text,
        shape.pos.x,
        shape.pos.y,
        text_id=f"txt_hover_{idx:02d}",
        font_size=shape.font_size,
        fill=_paint(shape.color)["value"],
        bottom_aligned=shape.anchor.endswith("bottom"),
    )


def add_shapes(builder: SvgBuilder, shapes: Iterable[Shape]) -> None:
    """Write primitives into the builder groups, keeping their order."""
    count = 0
    for idx, shape in enumerate(shapes):
        if isinstance(shape, RectShape):
            _add_rect(builder, shape, idx)
        elif isinstance(shape, LineSegment):
            _add_line(builder, shape, idx)
        elif isinstance(shape, TextShape):
            _add_text(builder, shape, idx)
        else:
            raise TypeError(f"Unsupported shape type: {type(shape).__name__}")
        count += 1
    logger.debug("Wrote %d shapes to SVG", count)


def render_shapes_svg(
    shapes: Iterable[Shape],
    width: int,
    height: int,
    output_svg: Path | None = None,
    background: str | None = None,
) -> str:
    builder = SvgBuilder.create(width=width, height=height)
    if background:
        builder.add_background(background)
    add_shapes(builder, shapes)
    if output_svg is not None:
        builder.save(output_svg)
    return builder.to_string()
