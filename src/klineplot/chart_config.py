from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from klineplot.colors import DEFAULT_PLOT_COLOR
from klineplot.errors import KlinePlotError
from klineplot.kline import KlineData, KlinePlotPoint
from klineplot.plot import KlinePlot
from klineplot.plot_types import Color32, PlotBounds, PlotPoint, Pos2, Rect, Stroke
from klineplot.transform import PlotTransform

DEFAULT_STYLE_CONFIG = Path(__file__).resolve().parents[2] / "config" / "chart_style.v1.yaml"

SPREAD_KEYS = ("o", "h", "l", "c", "v")

MIN_SPAN = 1.0


@dataclass(frozen=True)
class ChartStyle:
    width: int
    height: int
    margin_px: float
    bounds_margin: float
    box_width: float
    whisker_width: float
    stroke_width: float
    font_size: float
    text_color: Color32
    background: str | None
    frame_color: str | None


@dataclass
class ChartConfig:
    style: ChartStyle
    plot: KlinePlot
    bounds: PlotBounds | None

    def frame(self) -> Rect:
        margin = self.style.margin_px
        return Rect(
            Pos2(margin, margin),
            Pos2(self.style.width - margin, self.style.height - margin),
        )

    def resolved_bounds(self) -> PlotBounds:
        if self.bounds is not None:
            return self.bounds
        points: list[PlotPoint] = []
        for element in self.plot.elements:
            points.extend([element.bounds_min(), element.bounds_max()])
            points.extend(element.values_with_ruler())
        if not points:
            return PlotBounds(0.0, 0.0, 1.0, 1.0)
        bounds = PlotBounds.from_points(points).expanded(self.style.bounds_margin)
        return _with_min_span(bounds)

    def transform(self) -> PlotTransform:
        return PlotTransform(frame=self.frame(), bounds=self.resolved_bounds())


def _with_min_span(bounds: PlotBounds) -> PlotBounds:
    """Widen zero-span axes, e.g. a box whose five values are equal."""
    half_x = MIN_SPAN / 2.0 if bounds.width == 0 else 0.0
    half_y = MIN_SPAN / 2.0 if bounds.height == 0 else 0.0
    return PlotBounds(
        bounds.min_x - half_x,
        bounds.min_y - half_y,
        bounds.max_x + half_x,
        bounds.max_y + half_y,
    )


def _load_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text())
    except yaml.YAMLError as exc:
        raise KlinePlotError(
            code="E1101_CONFIG_INVALID",
            message=f"Failed to parse YAML {path}: {exc}",
            hint="Check the chart file for YAML syntax errors.",
        ) from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise KlinePlotError(
            code="E1102_CONFIG_TYPE",
            message=f"Chart config must be a mapping: {path}",
            hint="Put canvas/plot/boxes keys at the top level of the YAML file.",
        )
    return data


def _section(data: dict[str, Any], key: str) -> dict[str, Any]:
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise KlinePlotError(
            code="E1103_SECTION_TYPE",
            message=f"'{key}' must be a mapping.",
            hint=f"Write '{key}' as a YAML mapping or omit it.",
        )
    return value


def _number(value: Any, what: str) -> float:
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise KlinePlotError(
            code="E1104_NUMBER_INVALID",
            message=f"{what} must be numeric, got {value!r}.",
            hint="Use plain numbers for positions, values and widths.",
        ) from exc


def _color(value: Any, what: str) -> Color32:
    try:
        return Color32.from_hex(str(value))
    except ValueError as exc:
        raise KlinePlotError(
            code="E1105_COLOR_INVALID",
            message=f"{what} must be a #rrggbb or #rrggbbaa colour, got {value!r}.",
            hint="Write colours as quoted hex strings, e.g. \"#1f77b4\".",
        ) from exc


def load_style(path: Path | None = None, overrides: dict[str, Any] | None = None) -> ChartStyle:
    resolved = path or DEFAULT_STYLE_CONFIG
    if not resolved.exists():
        raise KlinePlotError(
            code="E1100_STYLE_MISSING",
            message=f"Style config not found: {resolved}",
            hint="Ensure config/chart_style.v1.yaml exists or pass --style.",
        )
    data = _load_yaml(resolved)
    for key, value in (overrides or {}).items():
        if isinstance(value, dict) and isinstance(data.get(key), dict):
            data[key] = {**data[key], **value}
        else:
            data[key] = value

    canvas = _section(data, "canvas")
    box = _section(data, "box")
    text = _section(data, "text")
    width = int(_number(canvas.get("width", 640), "canvas.width"))
    height = int(_number(canvas.get("height", 400), "canvas.height"))
    if width <= 0 or height <= 0:
        raise KlinePlotError(
            code="E1106_CANVAS_RANGE",
            message="canvas width/height must be positive.",
            hint="Provide positive canvas dimensions.",
        )
    margin_px = _number(data.get("margin_px", 40), "margin_px")
    if width <= 2 * margin_px or height <= 2 * margin_px:
        raise KlinePlotError(
            code="E1114_MARGIN_RANGE",
            message=f"margin_px {margin_px:g} leaves no plot area on a {width}x{height} canvas.",
            hint="Enlarge the canvas or reduce margin_px.",
        )
    return ChartStyle(
        width=width,
        height=height,
        margin_px=margin_px,
        bounds_margin=_number(data.get("bounds_margin", 0.1), "bounds_margin"),
        box_width=_number(box.get("box_width", 0.25), "box.box_width"),
        whisker_width=_number(box.get("whisker_width", 0.15), "box.whisker_width"),
        stroke_width=_number(box.get("stroke_width", 1.0), "box.stroke_width"),
        font_size=_number(text.get("font_size", 12), "text.font_size"),
        text_color=_color(text.get("color", "#000000"), "text.color"),
        background=data.get("background") or None,
        frame_color=data.get("frame_color") or None,
    )


def _spread(item: dict[str, Any], idx: int) -> KlineData:
    values = item.get("values")
    if values is not None:
        if not isinstance(values, list) or len(values) != len(SPREAD_KEYS):
            raise KlinePlotError(
                code="E1108_BOX_VALUES",
                message=f"boxes[{idx}].values must list exactly five numbers.",
                hint="Order is o, h, l, c, v.",
            )
        return KlineData(*(_number(value, f"boxes[{idx}].values") for value in values))
    missing = [key for key in SPREAD_KEYS if key not in item]
    if missing:
        raise KlinePlotError(
            code="E1108_BOX_VALUES",
            message=f"boxes[{idx}] is missing {', '.join(missing)}.",
            hint="Give either 'values: [o, h, l, c, v]' or the five keys o/h/l/c/v.",
        )
    return KlineData(*(_number(item[key], f"boxes[{idx}].{key}") for key in SPREAD_KEYS))


def _build_element(item: Any, idx: int, style: ChartStyle) -> KlinePlotPoint:
    if not isinstance(item, dict):
        raise KlinePlotError(
            code="E1107_BOX_TYPE",
            message=f"boxes[{idx}] must be a mapping.",
            hint="Each box needs an argument and its five values.",
        )
    if "argument" not in item:
        raise KlinePlotError(
            code="E1109_BOX_ARGUMENT",
            message=f"boxes[{idx}] is missing 'argument'.",
            hint="Set the position of the box on the argument axis.",
        )
    element = KlinePlotPoint(_number(item["argument"], f"boxes[{idx}].argument"), _spread(item, idx))
    element = element.with_box_width(_number(item.get("box_width", style.box_width), f"boxes[{idx}].box_width"))
    element = element.with_whisker_width(
        _number(item.get("whisker_width", style.whisker_width), f"boxes[{idx}].whisker_width")
    )
    stroke_width = _number(item.get("stroke_width", style.stroke_width), f"boxes[{idx}].stroke_width")
    element = element.with_stroke(Stroke(stroke_width, element.stroke.color))
    if item.get("stroke") is not None:
        element = element.with_stroke(Stroke(stroke_width, _color(item["stroke"], f"boxes[{idx}].stroke")))
    if item.get("fill") is not None:
        element = element.with_fill(_color(item["fill"], f"boxes[{idx}].fill"))
    if item.get("name") is not None:
        element = element.with_name(item["name"])
    return element


def _bounds(data: dict[str, Any]) -> PlotBounds | None:
    section = _section(data, "bounds")
    if not section:
        return None
    keys = ("min_x", "min_y", "max_x", "max_y")
    missing = [key for key in keys if key not in section]
    if missing:
        raise KlinePlotError(
            code="E1110_BOUNDS_MISSING",
            message=f"bounds is missing {', '.join(missing)}.",
            hint="Give all of min_x, min_y, max_x, max_y or omit bounds to auto-fit.",
        )
    bounds = PlotBounds(*(_number(section[key], f"bounds.{key}") for key in keys))
    if bounds.width <= 0 or bounds.height <= 0:
        raise KlinePlotError(
            code="E1111_BOUNDS_RANGE",
            message="bounds must have max_x > min_x and max_y > min_y.",
            hint="Swap or widen the bounds.",
        )
    return bounds


def load_chart(path: Path, style_path: Path | None = None) -> ChartConfig:
    data = _load_yaml(path)
    style_overrides = {key: data[key] for key in ("canvas", "margin_px", "background") if key in data}
    style = load_style(style_path, style_overrides)

    plot_section = _section(data, "plot")
    boxes = data.get("boxes")
    if not isinstance(boxes, list) or not boxes:
        raise KlinePlotError(
            code="E1112_BOXES_MISSING",
            message="Chart config needs a non-empty 'boxes' list.",
            hint="Add at least one box with argument and o/h/l/c/v values.",
        )
    elements = [_build_element(item, idx, style) for idx, item in enumerate(boxes)]
    color = plot_section.get("color")
    plot = KlinePlot(
        elements=elements,
        name=str(plot_section.get("name") or ""),
        default_color=_color(color, "plot.color") if color is not None else Color32.from_hex(DEFAULT_PLOT_COLOR),
    )
    orientation = str(plot_section.get("orientation", "vertical")).strip().lower()
    if orientation == "horizontal":
        plot.horizontal()
    elif orientation == "vertical":
        plot.vertical()
    else:
        raise KlinePlotError(
            code="E1113_ORIENTATION_INVALID",
            message=f"Unknown orientation '{orientation}'.",
            hint="Use 'vertical' or 'horizontal'.",
        )
    return ChartConfig(style=style, plot=plot, bounds=_bounds(data))
