from __future__ import annotations

from dataclasses import dataclass

from klineplot.element import RectElement
from klineplot.plot_types import BLACK, Color32, Cursor, Orientation, Shape, TextShape
from klineplot.transform import Transform

TEXT_OFFSET = (3.0, -2.0)
DEFAULT_FONT_SIZE = 12.0


@dataclass(frozen=True)
class PlotConfig:
    """Host plot state the ruler routine reads."""

    transform: Transform
    show_x: bool = True
    show_y: bool = True
    text_color: Color32 = BLACK
    font_size: float = DEFAULT_FONT_SIZE


def add_rulers_and_text(
    element: RectElement,
    plot: PlotConfig,
    text: str | None,
    shapes: list[Shape],
    cursors: list[Cursor],
) -> None:
    orientation = element.orientation
    vertical = orientation == Orientation.VERTICAL
    show_argument = (plot.show_x and vertical) or (plot.show_y and not vertical)
    show_values = (plot.show_y and vertical) or (plot.show_x and not vertical)

    if show_argument:
        for point in element.arguments_with_ruler():
            cursors.append(Cursor.vertical(point.x) if vertical else Cursor.horizontal(point.y))

    if show_values:
        for point in element.values_with_ruler():
            cursors.append(Cursor.horizontal(point.y) if vertical else Cursor.vertical(point.x))

    if text is None:
        text = element.name
        if show_values:
            text += "\n" + element.default_values_format(plot.transform)

    anchor = plot.transform.position_from_point(element.corner_value())
    shapes.append(
        TextShape(
            pos=anchor.offset(*TEXT_OFFSET),
            text=text,
            color=plot.text_color,
            font_size=plot.font_size,
            anchor="left_bottom",
        )
    )
