from __future__ import annotations

from klineplot.kline import KlineData, KlinePlotPoint
from klineplot.plot import KlinePlot
from klineplot.plot_types import Color32, Cursor, Pos2, TextShape
from klineplot.rulers import PlotConfig, add_rulers_and_text


def _element() -> KlinePlotPoint:
    spread = KlineData(o=10.0, h=15.0, l=20.0, c=25.0, v=30.0)
    return KlinePlotPoint(5.0, spread).with_box_width(2.0).with_whisker_width(1.0).with_name("api")


def test_default_text_and_cursors_for_vertical_element(identity_transform) -> None:
    shapes = []
    cursors = []
    element = _element()
    add_rulers_and_text(element, PlotConfig(transform=identity_transform), None, shapes, cursors)

    assert cursors == [
        Cursor.vertical(5.0),
        Cursor.horizontal(30.0),
        Cursor.horizontal(10.0),
        Cursor.horizontal(25.0),
        Cursor.horizontal(15.0),
        Cursor.horizontal(20.0),
    ]
    assert len(shapes) == 1
    text = shapes[0]
    assert isinstance(text, TextShape)
    assert text.pos == Pos2(8.0, 13.0)
    assert text.anchor == "left_bottom"
    assert text.text == "api\n" + element.default_values_format(identity_transform)


def test_hidden_value_axis_leaves_only_name(identity_transform) -> None:
    shapes = []
    cursors = []
    plot = PlotConfig(transform=identity_transform, show_y=False, text_color=Color32(1, 2, 3))
    add_rulers_and_text(_element(), plot, None, shapes, cursors)

    assert cursors == [Cursor.vertical(5.0)]
    assert shapes[0].text == "api"
    assert shapes[0].color == Color32(1, 2, 3)


def test_horizontal_element_swaps_cursor_kinds(identity_transform) -> None:
    shapes = []
    cursors = []
    add_rulers_and_text(_element().horizontal(), PlotConfig(transform=identity_transform), "x", shapes, cursors)

    assert cursors[0] == Cursor.horizontal(5.0)
    assert cursors[1:] == [Cursor.vertical(value) for value in (30.0, 10.0, 25.0, 15.0, 20.0)]
    assert shapes[0].text == "x"


def test_parent_formatter_supplies_text(identity_transform) -> None:
    plot = KlinePlot(elements=[_element()], name="latency")
    plot.formatter(lambda element, parent: f"{parent.name}/{element.name}")
    shapes, cursors = plot.rulers(PlotConfig(transform=identity_transform), 0)

    assert shapes[0].text == "latency/api"
    assert len(cursors) == 6


def test_without_formatter_falls_back_to_default_text(identity_transform) -> None:
    element = _element()
    plot = KlinePlot(elements=[element])
    shapes = []
    cursors = []
    element.add_rulers_and_text(plot, PlotConfig(transform=identity_transform), shapes, cursors)

    assert shapes[0].text.startswith("api\nMax = 30.00")
