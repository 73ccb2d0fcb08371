from __future__ import annotations

from klineplot.kline import KlineData, KlinePlotPoint
from klineplot.plot import KlinePlot
from klineplot.plot_types import Color32, Orientation, PlotBounds, Stroke


def _elements() -> list[KlinePlotPoint]:
    return [
        KlinePlotPoint(1.0, KlineData(o=10.0, h=15.0, l=20.0, c=25.0, v=30.0)),
        KlinePlotPoint(2.0, KlineData(o=12.0, h=14.0, l=8.0, c=22.0, v=22.0)).with_box_width(0.5),
    ]


def test_shapes_concatenate_elements_in_order(identity_transform) -> None:
    plot = KlinePlot(elements=_elements())
    shapes = plot.shapes(identity_transform)
    assert len(shapes) == 8
    assert shapes[0].rect.min.x == 0.875
    assert shapes[4].rect.min.x == 1.75


def test_only_selected_element_is_highlighted(identity_transform) -> None:
    plot = KlinePlot(elements=_elements(), default_color=Color32(255, 0, 0))
    shapes = plot.shapes(identity_transform, highlighted=1)
    assert shapes[0].stroke.width == 1.0
    assert shapes[4].stroke.width == 2.0


def test_highlight_flag_applies_to_every_element(identity_transform) -> None:
    plot = KlinePlot(elements=_elements(), highlight=True)
    shapes = plot.shapes(identity_transform)
    assert all(shape.stroke.width == 2.0 for shape in shapes)


def test_default_color_only_paints_unstyled_elements() -> None:
    styled = _elements()[0].with_stroke(Stroke(2.0, Color32(0, 0, 0)))
    plot = KlinePlot(elements=[styled, _elements()[1]], default_color=Color32(0, 128, 255))

    assert plot.elements[0].stroke == Stroke(2.0, Color32(0, 0, 0))
    assert plot.elements[1].stroke == Stroke(1.0, Color32(0, 128, 255))
    assert plot.elements[1].fill == Color32(0, 128, 255, 64)


def test_orientation_propagates_to_elements() -> None:
    plot = KlinePlot(elements=_elements())
    assert plot.orientation == Orientation.VERTICAL
    plot.horizontal()
    assert plot.orientation == Orientation.HORIZONTAL
    assert all(element.orientation == Orientation.HORIZONTAL for element in plot.elements)


def test_bounds_union_of_elements() -> None:
    plot = KlinePlot(elements=_elements())
    assert plot.bounds() == PlotBounds(0.875, 8.0, 2.25, 20.0)
    assert KlinePlot(elements=[]).bounds() is None
