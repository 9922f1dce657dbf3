"""Radar (spider) chart geometry engine with Qt and Kivy front ends.

The core (``radarchart.core``) has no toolkit dependency:

    >>> from radarchart import ChartGeometry
    >>> chart = ChartGeometry()
    >>> chart.set_axis({"speed": 5, "power": 15, "range": 10})
    >>> chart.resize(240, 240)
    >>> chart.axis_max
    15.0
"""

from radarchart.core.chart_geometry import ChartGeometry, layout_for_size
from radarchart.core.errors import (
    AxisValueError,
    ConfigError,
    InvalidConfigurationError,
    RadarChartError,
)
from radarchart.core.render_intent import GraphStyle, RenderIntent, RingMode
from radarchart.core.renderer import Renderer, label_anchor, paint_chart
from radarchart.core.ring_builder import Ring, build_rings

__version__ = "1.0.0"

__all__ = [
    "ChartGeometry",
    "layout_for_size",
    "GraphStyle",
    "RingMode",
    "RenderIntent",
    "Renderer",
    "Ring",
    "build_rings",
    "label_anchor",
    "paint_chart",
    "RadarChartError",
    "ConfigError",
    "InvalidConfigurationError",
    "AxisValueError",
]
