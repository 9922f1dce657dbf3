"""Qt widgets for the radar chart."""

from radarchart_qt.widgets.radar_chart_widget import (
    QtPainterRenderer,
    RadarChartWidget,
    render_intent_to_image,
)

__all__ = ["RadarChartWidget", "QtPainterRenderer", "render_intent_to_image"]
