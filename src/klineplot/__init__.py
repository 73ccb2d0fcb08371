"""klineplot library package."""

from .errors import KlinePlotError
from .kline import KlineData, KlinePlotPoint
from .plot import KlinePlot
from .plot_types import Color32, Orientation, PlotBounds, PlotPoint, Stroke
from .render import describe_chart, render_chart
from .rulers import PlotConfig
from .transform import PlotTransform

__all__ = [
    "KlinePlotError",
    "KlineData",
    "KlinePlotPoint",
    "KlinePlot",
    "Color32",
    "Orientation",
    "PlotBounds",
    "PlotPoint",
    "Stroke",
    "PlotConfig",
    "PlotTransform",
    "render_chart",
    "describe_chart",
]
