from __future__ import annotations

import math
from typing import Protocol, runtime_checkable

from klineplot.plot_types import Orientation, PlotBounds, PlotPoint
from klineplot.transform import Transform

MIN_DECIMALS = 1
MAX_DECIMALS = 6


@runtime_checkable
class RectElement(Protocol):
    """Capabilities a host plot needs from a rectangular element.

    Box glyphs and any other element kind implementing these methods can be
    handled by the same ruler and bounds code.
    """

    name: str
    orientation: Orientation

    def bounds_min(self) -> PlotPoint: ...

    def bounds_max(self) -> PlotPoint: ...

    def values_with_ruler(self) -> list[PlotPoint]: ...

    def arguments_with_ruler(self) -> list[PlotPoint]: ...

    def corner_value(self) -> PlotPoint: ...

    def default_values_format(self, transform: Transform) -> str: ...


def element_bounds(element: RectElement) -> PlotBounds:
    return PlotBounds.from_points([element.bounds_min(), element.bounds_max()])


def value_decimals(scale: float) -> int:
    """Decimals needed to show values at ``scale`` plot units per pixel."""
    magnitude = abs(scale)
    if magnitude == 0.0:
        return MAX_DECIMALS
    if not math.isfinite(magnitude):
        return MIN_DECIMALS
    decimals = math.ceil(-math.log10(magnitude))
    return max(MIN_DECIMALS, min(MAX_DECIMALS, decimals))
