from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Protocol

from klineplot.plot_types import PlotBounds, PlotPoint, Pos2, Rect


class Transform(Protocol):
    """What plot elements need from the host's coordinate transform."""

    def position_from_point(self, value: PlotPoint) -> Pos2: ...

    def value_from_position(self, pos: Pos2) -> PlotPoint: ...

    def rect_from_values(self, value1: PlotPoint, value2: PlotPoint) -> Rect: ...

    def dvalue_dpos(self) -> tuple[float, float]: ...


@dataclass(frozen=True)
class PlotTransform:
    """Linear map between a screen frame and plot bounds.

    Screen Y grows downwards, plot Y grows upwards, so ``max_y`` lands on the
    top edge of ``frame``.
    """

    frame: Rect
    bounds: PlotBounds

    def position_from_point_x(self, value: float) -> float:
        return _remap(value, self.bounds.min_x, self.bounds.max_x, self.frame.min.x, self.frame.max.x)

    def position_from_point_y(self, value: float) -> float:
        return _remap(value, self.bounds.min_y, self.bounds.max_y, self.frame.max.y, self.frame.min.y)

    def position_from_point(self, value: PlotPoint) -> Pos2:
        return Pos2(self.position_from_point_x(value.x), self.position_from_point_y(value.y))

    def value_from_position(self, pos: Pos2) -> PlotPoint:
        x = _remap(pos.x, self.frame.min.x, self.frame.max.x, self.bounds.min_x, self.bounds.max_x)
        y = _remap(pos.y, self.frame.max.y, self.frame.min.y, self.bounds.min_y, self.bounds.max_y)
        return PlotPoint(x, y)

    def rect_from_values(self, value1: PlotPoint, value2: PlotPoint) -> Rect:
        return Rect.from_two_pos(self.position_from_point(value1), self.position_from_point(value2))

    def dpos_dvalue_x(self) -> float:
        return _ratio(self.frame.width, self.bounds.width)

    def dpos_dvalue_y(self) -> float:
        return _ratio(-self.frame.height, self.bounds.height)

    def dpos_dvalue(self) -> tuple[float, float]:
        return self.dpos_dvalue_x(), self.dpos_dvalue_y()

    def dvalue_dpos(self) -> tuple[float, float]:
        """Plot units per screen unit on each axis.

        A zero-span axis gives an infinite or zero scale instead of raising.
        """
        return _ratio(1.0, self.dpos_dvalue_x()), _ratio(1.0, self.dpos_dvalue_y())


def _ratio(numerator: float, denominator: float) -> float:
    # IEEE semantics: x / 0 is +-inf, 0 / 0 is nan.
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def _remap(value: float, from_lo: float, from_hi: float, to_lo: float, to_hi: float) -> float:
    span = from_hi - from_lo
    if span == 0:
        return (to_lo + to_hi) / 2.0
    return to_lo + (value - from_lo) * (to_hi - to_lo) / span
