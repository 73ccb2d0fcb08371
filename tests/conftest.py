from __future__ import annotations

from dataclasses import dataclass

import pytest

from klineplot.plot_types import PlotPoint, Pos2, Rect


@dataclass
class IdentityTransform:
    """Maps plot coordinates straight onto screen coordinates."""

    scale: tuple[float, float] = (0.02, 0.02)

    def position_from_point(self, value: PlotPoint) -> Pos2:
        return Pos2(value.x, value.y)

    def value_from_position(self, pos: Pos2) -> PlotPoint:
        return PlotPoint(pos.x, pos.y)

    def rect_from_values(self, value1: PlotPoint, value2: PlotPoint) -> Rect:
        return Rect.from_two_pos(self.position_from_point(value1), self.position_from_point(value2))

    def dvalue_dpos(self) -> tuple[float, float]:
        return self.scale


@pytest.fixture
def identity_transform() -> IdentityTransform:
    return IdentityTransform()
