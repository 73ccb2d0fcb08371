from __future__ import annotations

import math

import pytest

from klineplot.plot_types import PlotBounds, PlotPoint, Pos2, Rect
from klineplot.transform import PlotTransform


def _transform() -> PlotTransform:
    return PlotTransform(
        frame=Rect(Pos2(10.0, 20.0), Pos2(210.0, 120.0)),
        bounds=PlotBounds(0.0, 0.0, 10.0, 50.0),
    )


def test_position_from_point_flips_y() -> None:
    transform = _transform()
    assert transform.position_from_point(PlotPoint(0.0, 0.0)) == Pos2(10.0, 120.0)
    assert transform.position_from_point(PlotPoint(10.0, 50.0)) == Pos2(210.0, 20.0)
    assert transform.position_from_point(PlotPoint(5.0, 25.0)) == Pos2(110.0, 70.0)


def test_value_from_position_inverts_mapping() -> None:
    transform = _transform()
    value = transform.value_from_position(Pos2(60.0, 95.0))
    assert value.x == pytest.approx(2.5)
    assert value.y == pytest.approx(12.5)


def test_rect_from_values_normalizes_corners() -> None:
    rect = _transform().rect_from_values(PlotPoint(2.0, 40.0), PlotPoint(1.0, 10.0))
    assert rect.min == Pos2(30.0, 40.0)
    assert rect.max == Pos2(50.0, 100.0)


def test_scales() -> None:
    transform = _transform()
    assert transform.dpos_dvalue() == (20.0, -2.0)
    assert transform.dvalue_dpos() == (0.05, -0.5)


def test_degenerate_bounds_map_to_frame_center() -> None:
    transform = PlotTransform(frame=Rect(Pos2(0.0, 0.0), Pos2(100.0, 100.0)), bounds=PlotBounds(1.0, 1.0, 1.0, 2.0))
    assert transform.position_from_point(PlotPoint(1.0, 2.0)).x == 50.0
    assert transform.dpos_dvalue() == (math.inf, -100.0)
    assert transform.dvalue_dpos() == (0.0, -0.01)


def test_zero_height_bounds_give_zero_value_scale() -> None:
    transform = PlotTransform(frame=Rect(Pos2(0.0, 0.0), Pos2(100.0, 100.0)), bounds=PlotBounds(0.0, 5.0, 1.0, 5.0))
    assert transform.dpos_dvalue_y() == -math.inf
    assert transform.dvalue_dpos() == (0.01, 0.0)


def test_zero_frame_and_bounds_give_nan_scale() -> None:
    transform = PlotTransform(frame=Rect(Pos2(10.0, 10.0), Pos2(10.0, 50.0)), bounds=PlotBounds(2.0, 0.0, 2.0, 1.0))
    scale_x, _ = transform.dvalue_dpos()
    assert math.isnan(scale_x)


def test_zero_frame_gives_infinite_value_scale() -> None:
    transform = PlotTransform(frame=Rect(Pos2(0.0, 0.0), Pos2(0.0, 0.0)), bounds=PlotBounds(0.0, 0.0, 10.0, 10.0))
    assert transform.dpos_dvalue() == (0.0, 0.0)
    scale_x, scale_y = transform.dvalue_dpos()
    assert math.isinf(scale_x)
    assert math.isinf(scale_y)
