from __future__ import annotations

from dataclasses import replace

from klineplot.plot_types import Color32, Stroke

# Used for boxes of a chart file that sets no plot.color.
DEFAULT_PLOT_COLOR = "#1f77b4"

FILL_ALPHA = 0.25


def highlighted_color(stroke: Stroke, fill: Color32) -> tuple[Stroke, Color32]:
    """Adjust colours of an element under the pointer.

    The stroke gets twice as wide and the fill twice as opaque.
    """
    stroke = replace(stroke, width=stroke.width * 2.0)
    fill = replace(fill, a=min(fill.a * 2, 255))
    return stroke, fill


def with_alpha(color: Color32, alpha: float) -> Color32:
    alpha = max(0.0, min(1.0, alpha))
    return replace(color, a=int(round(alpha * 255)))
