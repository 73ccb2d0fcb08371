"""Box (candlestick) element of a kline plot.

This is a low-level graphical element: it does not compute quartiles or
whiskers, callers pass precomputed values in a :class:`KlineData`.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

from klineplot.colors import highlighted_color
from klineplot.element import element_bounds, value_decimals
from klineplot.plot_types import (
    TRANSPARENT,
    Color32,
    Cursor,
    LineSegment,
    Orientation,
    PlotPoint,
    RectShape,
    Shape,
    Stroke,
)
from klineplot.rulers import PlotConfig, add_rulers_and_text
from klineplot.transform import Transform

if TYPE_CHECKING:
    from klineplot.plot import KlinePlot


@dataclass(frozen=True)
class KlineData:
    """The five values of one box.

    The single-letter names are kept for compatibility with candle feeds, but
    drawing treats them by position:

    - ``o``: lower whisker. The lower whisker is not drawn if ``l >= o``.
    - ``h``: lower box threshold (typically 25% quartile).
    - ``l``: middle line of the box (typically the median).
    - ``c``: upper box threshold (typically 75% quartile).
    - ``v``: upper whisker. It is not drawn if ``v <= c``.
    """

    o: float
    h: float
    l: float  # noqa: E741
    c: float
    v: float

    @property
    def lower_whisker(self) -> float:
        return self.o

    @property
    def lower_box_edge(self) -> float:
        return self.h

    @property
    def center_line(self) -> float:
        return self.l

    @property
    def upper_box_edge(self) -> float:
        return self.c

    @property
    def upper_whisker(self) -> float:
        return self.v


@dataclass(frozen=True)
class KlinePlotPoint:
    """A box in a kline plot.

    Setters return a copy with one field changed so elements can be built in a
    chain: ``KlinePlotPoint(1.0, data).with_name("a").with_box_width(0.5)``.
    """

    argument: float
    spread: KlineData
    name: str = ""
    orientation: Orientation = field(default_factory=Orientation.default)
    box_width: float = 0.25
    whisker_width: float = 0.15
    stroke: Stroke = field(default_factory=lambda: Stroke(1.0, TRANSPARENT))
    fill: Color32 = TRANSPARENT

    def with_name(self, name: object) -> KlinePlotPoint:
        return replace(self, name=str(name))

    def with_stroke(self, stroke: Stroke) -> KlinePlotPoint:
        return replace(self, stroke=stroke)

    def with_fill(self, color: Color32) -> KlinePlotPoint:
        return replace(self, fill=color)

    def with_box_width(self, width: float) -> KlinePlotPoint:
        return replace(self, box_width=width)

    def with_whisker_width(self, width: float) -> KlinePlotPoint:
        return replace(self, whisker_width=width)

    def vertical(self) -> KlinePlotPoint:
        """Argument axis is X."""
        return replace(self, orientation=Orientation.VERTICAL)

    def horizontal(self) -> KlinePlotPoint:
        """Argument axis is Y."""
        return replace(self, orientation=Orientation.HORIZONTAL)

    def point_at(self, argument: float, value: float) -> PlotPoint:
        if self.orientation == Orientation.HORIZONTAL:
            return PlotPoint(value, argument)
        return PlotPoint(argument, value)

    def add_shapes(self, transform: Transform, highlighted: bool, shapes: list[Shape]) -> None:
        """Append the box primitives to ``shapes``.

        Order is fixed: box, center line, then upper whisker and its cap, then
        lower whisker and its cap. Whisker lines are skipped when the whisker
        does not extend past the box, caps are skipped when ``box_width`` is 0.
        """
        if highlighted:
            stroke, fill = highlighted_color(self.stroke, self.fill)
        else:
            stroke, fill = self.stroke, self.fill

        spread = self.spread
        half_box = self.box_width / 2.0
        half_whisker = self.whisker_width / 2.0

        rect = transform.rect_from_values(
            self.point_at(self.argument - half_box, spread.lower_whisker),
            self.point_at(self.argument + half_box, spread.upper_box_edge),
        )
        shapes.append(RectShape(rect=rect, corner_radius=0.0, fill=fill, stroke=stroke, stroke_kind="inside"))

        def line_between(p1: PlotPoint, p2: PlotPoint) -> LineSegment:
            return LineSegment(
                points=(transform.position_from_point(p1), transform.position_from_point(p2)),
                stroke=stroke,
            )

        shapes.append(
            line_between(
                self.point_at(self.argument - half_box, spread.center_line),
                self.point_at(self.argument + half_box, spread.center_line),
            )
        )

        if spread.upper_whisker > spread.upper_box_edge:
            shapes.append(
                line_between(
                    self.point_at(self.argument, spread.upper_box_edge),
                    self.point_at(self.argument, spread.upper_whisker),
                )
            )
            if self.box_width > 0.0:
                shapes.append(
                    line_between(
                        self.point_at(self.argument - half_whisker, spread.upper_whisker),
                        self.point_at(self.argument + half_whisker, spread.upper_whisker),
                    )
                )

        # Compares the center line with the lower whisker, not the box edge.
        if spread.center_line < spread.lower_whisker:
            shapes.append(
                line_between(
                    self.point_at(self.argument, spread.lower_whisker),
                    self.point_at(self.argument, spread.center_line),
                )
            )
            if self.box_width > 0.0:
                shapes.append(
                    line_between(
                        self.point_at(self.argument - half_whisker, spread.center_line),
                        self.point_at(self.argument + half_whisker, spread.center_line),
                    )
                )

    def add_rulers_and_text(
        self,
        parent: KlinePlot,
        plot: PlotConfig,
        shapes: list[Shape],
        cursors: list[Cursor],
    ) -> None:
        text = None
        if parent.element_formatter is not None:
            text = parent.element_formatter(self, parent)
        add_rulers_and_text(self, plot, text, shapes, cursors)

    # RectElement

    def bounds_min(self) -> PlotPoint:
        argument = self.argument - max(self.box_width, self.whisker_width) / 2.0
        return self.point_at(argument, self.spread.center_line)

    def bounds_max(self) -> PlotPoint:
        argument = self.argument + max(self.box_width, self.whisker_width) / 2.0
        return self.point_at(argument, self.spread.lower_box_edge)

    def values_with_ruler(self) -> list[PlotPoint]:
        spread = self.spread
        return [
            self.point_at(self.argument, spread.upper_whisker),
            self.point_at(self.argument, spread.lower_whisker),
            self.point_at(self.argument, spread.upper_box_edge),
            self.point_at(self.argument, spread.lower_box_edge),
            self.point_at(self.argument, spread.center_line),
        ]

    def arguments_with_ruler(self) -> list[PlotPoint]:
        return [element_bounds(self).center]

    def corner_value(self) -> PlotPoint:
        return self.point_at(self.argument, self.spread.lower_box_edge)

    def default_values_format(self, transform: Transform) -> str:
        scale_x, scale_y = transform.dvalue_dpos()
        scale = scale_x if self.orientation == Orientation.HORIZONTAL else scale_y
        decimals = value_decimals(scale)
        # Labels follow the positional meaning of each field, not the o/h/l/c/v letters.
        spread = self.spread
        return (
            f"Max = {spread.upper_whisker:.{decimals}f}"
            f"\nQuartile 3 = {spread.upper_box_edge:.{decimals}f}"
            f"\nMedian = {spread.center_line:.{decimals}f}"
            f"\nQuartile 1 = {spread.lower_box_edge:.{decimals}f}"
            f"\nMin = {spread.lower_whisker:.{decimals}f}"
        )
