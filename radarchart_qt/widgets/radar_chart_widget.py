"""
RadarChartWidget - Qt widget that draws a ChartGeometry with QPainter.

Features:
- Owns a ChartGeometry (composition, the core knows nothing about Qt)
- Feeds its size and padding into the chart on every resize
- Repaints whenever the chart publishes a redraw event
- QtPainterRenderer implements the core Renderer contract on a QPainter
"""

import logging
from typing import Any, Dict, Optional, Sequence, Tuple

from PySide6.QtCore import QPointF, QSize, Qt
from PySide6.QtGui import QBrush, QColor, QFont, QFontMetricsF, QImage, QPainter, QPainterPath, QPen
from PySide6.QtWidgets import QWidget

from radarchart.common.typed_config import LayoutConfig, TypedConfigReader
from radarchart.core.chart_geometry import ChartGeometry, Padding
from radarchart.core.color_gradient import RGB
from radarchart.core.render_intent import GraphStyle, RenderIntent
from radarchart.core.renderer import paint_chart
from radarchart.core.state import Event
from radarchart.core.vertex_projector import Point

logger = logging.getLogger(__name__)


# =============================================================================
# Constants
# =============================================================================

BACKGROUND_COLOR = QColor("#FFFFFF")
DEFAULT_PADDING: Padding = (24.0, 24.0, 24.0, 24.0)
MINIMUM_SIZE = 120


def to_qcolor(color: RGB) -> QColor:
    return QColor(color[0], color[1], color[2])


# =============================================================================
# QtPainterRenderer
# =============================================================================


class QtPainterRenderer:
    """Renderer backed by an active QPainter.

    Every call sets its own pen and brush; nothing carries over between calls.
    """

    def __init__(self, painter: QPainter):
        self._painter = painter

    def _pen(self, color: RGB, width: float) -> QPen:
        pen = QPen(to_qcolor(color), width)
        pen.setJoinStyle(Qt.MiterJoin)
        return pen

    def draw_circle(self, center: Point, radius: float, color: RGB, width: float) -> None:
        self._painter.setPen(self._pen(color, width))
        self._painter.setBrush(Qt.NoBrush)
        self._painter.drawEllipse(QPointF(center[0], center[1]), radius, radius)

    def draw_closed_path(self, points: Sequence[Point], style: GraphStyle, color: RGB, width: float) -> None:
        if not points:
            return
        path = QPainterPath()
        path.moveTo(QPointF(points[0][0], points[0][1]))
        for x, y in points[1:]:
            path.lineTo(QPointF(x, y))
        path.closeSubpath()

        if style in (GraphStyle.STROKE, GraphStyle.STROKE_AND_FILL):
            self._painter.setPen(self._pen(color, width))
        else:
            self._painter.setPen(Qt.NoPen)
        if style in (GraphStyle.FILL, GraphStyle.STROKE_AND_FILL):
            self._painter.setBrush(QBrush(to_qcolor(color)))
        else:
            self._painter.setBrush(Qt.NoBrush)
        self._painter.drawPath(path)

    def draw_line(self, start: Point, end: Point, color: RGB, width: float) -> None:
        self._painter.setPen(self._pen(color, width))
        self._painter.drawLine(QPointF(start[0], start[1]), QPointF(end[0], end[1]))

    def draw_point(self, point: Point, color: RGB, width: float) -> None:
        pen = self._pen(color, width)
        pen.setCapStyle(Qt.RoundCap)
        self._painter.setPen(pen)
        self._painter.drawPoint(QPointF(point[0], point[1]))

    def _font(self, font_size: float) -> QFont:
        font = QFont(self._painter.font())
        font.setPixelSize(max(1, int(round(font_size))))
        return font

    def draw_text(self, text: str, x: float, y: float, font_size: float, color: RGB) -> None:
        self._painter.setFont(self._font(font_size))
        self._painter.setPen(QPen(to_qcolor(color)))
        self._painter.drawText(QPointF(x, y), text)

    def measure_text(self, text: str, font_size: float) -> Tuple[float, float]:
        rect = QFontMetricsF(self._font(font_size)).tightBoundingRect(text)
        return (rect.width(), rect.height())


def render_intent_to_image(intent: RenderIntent, width: int, height: int) -> QImage:
    """Paint a frame into an offscreen image (export, tests)."""
    image = QImage(width, height, QImage.Format_ARGB32)
    image.fill(BACKGROUND_COLOR)
    painter = QPainter(image)
    try:
        painter.setRenderHint(QPainter.Antialiasing)
        paint_chart(intent, QtPainterRenderer(painter))
    finally:
        painter.end()
    return image


# =============================================================================
# RadarChartWidget
# =============================================================================


class RadarChartWidget(QWidget):
    """
    Widget displaying one radar chart.

    The chart is reachable through ``chart``; mutate it directly
    (``widget.chart.add_or_replace("speed", 12)``) and the widget repaints.
    """

    def __init__(
        self,
        chart: Optional[ChartGeometry] = None,
        padding: Padding = DEFAULT_PADDING,
        parent=None,
    ):
        super().__init__(parent)
        self.setMinimumSize(MINIMUM_SIZE, MINIMUM_SIZE)

        self._chart = chart if chart is not None else ChartGeometry()
        self._padding = padding
        self._chart.subscribe(self._on_chart_changed)

        # The chart may outlive this widget; stop listening once Qt deletes it
        chart, callback = self._chart, self._on_chart_changed
        self.destroyed.connect(lambda *_: chart.unsubscribe(callback))

    @classmethod
    def from_config(cls, config: Dict[str, Any], parent=None) -> "RadarChartWidget":
        """Build from a plain config dict with "chart" and "layout" sections."""
        reader = TypedConfigReader(config)
        layout: LayoutConfig = reader.get_layout()
        return cls(ChartGeometry.from_config(reader.get_chart()), padding=layout.as_tuple(), parent=parent)

    @property
    def chart(self) -> ChartGeometry:
        return self._chart

    @property
    def padding(self) -> Padding:
        return self._padding

    def set_padding(self, padding: Padding) -> None:
        self._padding = padding
        self._relayout()

    def sizeHint(self) -> QSize:
        return QSize(320, 320)

    def _on_chart_changed(self, event: Event) -> None:
        self.update()

    def _relayout(self) -> None:
        self._chart.resize(self.width(), self.height(), self._padding)
        logger.debug("Relayout %dx%d -> %s", self.width(), self.height(), self._chart.describe())

    # -------------------------------------------------------------------------
    # Qt events
    # -------------------------------------------------------------------------

    def resizeEvent(self, event):
        super().resizeEvent(event)
        self._relayout()

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing)
        painter.fillRect(self.rect(), BACKGROUND_COLOR)
        paint_chart(self._chart.render_intent(), QtPainterRenderer(painter))
        painter.end()
