from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Callable

from klineplot.colors import FILL_ALPHA, with_alpha
from klineplot.element import element_bounds
from klineplot.kline import KlinePlotPoint
from klineplot.plot_types import Color32, Cursor, Orientation, PlotBounds, Shape, Stroke
from klineplot.rulers import PlotConfig
from klineplot.transform import Transform

logger = logging.getLogger(__name__)

ElementFormatter = Callable[[KlinePlotPoint, "KlinePlot"], str]


@dataclass
class KlinePlot:
    """A named collection of boxes sharing orientation, colour and formatter."""

    elements: list[KlinePlotPoint]
    name: str = ""
    default_color: Color32 | None = None
    element_formatter: ElementFormatter | None = None
    highlight: bool = False
    _orientation: Orientation | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if self.default_color is not None:
            self.color(self.default_color)

    def color(self, color: Color32) -> KlinePlot:
        """Paint every element that has neither stroke nor fill yet."""
        self.default_color = color
        self.elements = [
            _apply_default_color(element, color) for element in self.elements
        ]
        return self

    def vertical(self) -> KlinePlot:
        self._orientation = Orientation.VERTICAL
        self.elements = [element.vertical() for element in self.elements]
        return self

    def horizontal(self) -> KlinePlot:
        self._orientation = Orientation.HORIZONTAL
        self.elements = [element.horizontal() for element in self.elements]
        return self

    def formatter(self, formatter: ElementFormatter) -> KlinePlot:
        self.element_formatter = formatter
        return self

    @property
    def orientation(self) -> Orientation:
        if self._orientation is not None:
            return self._orientation
        if self.elements:
            return self.elements[0].orientation
        return Orientation.default()

    def shapes(self, transform: Transform, highlighted: int | None = None) -> list[Shape]:
        """Primitives of every element, in element order.

        ``highlighted`` is the index of the element under the pointer. When the
        whole plot is highlighted every element is.
        """
        shapes: list[Shape] = []
        for index, element in enumerate(self.elements):
            element.add_shapes(transform, self.highlight or index == highlighted, shapes)
        logger.debug("Plot %r produced %d shapes from %d boxes", self.name, len(shapes), len(self.elements))
        return shapes

    def bounds(self) -> PlotBounds | None:
        bounds: PlotBounds | None = None
        for element in self.elements:
            current = element_bounds(element)
            bounds = current if bounds is None else bounds.union(current)
        return bounds

    def rulers(
        self, plot: PlotConfig, index: int
    ) -> tuple[list[Shape], list[Cursor]]:
        """Hover text and cursors for the element at ``index``."""
        shapes: list[Shape] = []
        cursors: list[Cursor] = []
        self.elements[index].add_rulers_and_text(self, plot, shapes, cursors)
        return shapes, cursors


def _apply_default_color(element: KlinePlotPoint, color: Color32) -> KlinePlotPoint:
    if not (element.stroke.color.is_transparent() and element.fill.is_transparent()):
        return element
    return replace(
        element,
        stroke=Stroke(element.stroke.width, color),
        fill=with_alpha(color, FILL_ALPHA),
    )
