"""
Radar chart Qt demo - a window around RadarChartWidget.

Run with:
    python -m radarchart_qt [--config chart.json]

Features:
  - Sample axes on startup (or none with --empty)
  - Toolbar: add/remove/clear axes, circles only, auto size, graph style, smooth gradient
  - Status bar shows the current scale and ring summary

The optional JSON config has "chart" and "layout" sections, e.g.
    {"chart": {"axis_max": 20, "graph_style": "stroke_and_fill"}, "layout": {"padding": 32}}

Logging:
  - Set RADARCHART_QT_LOGLEVEL=DEBUG for verbose logging
  - Default level is INFO
"""

import argparse
import json
import logging
import os
import random
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional


# =============================================================================
# Logging Configuration
# =============================================================================

def setup_logging():
    """Configure logging for the radarchart_qt and radarchart packages."""
    # Get log level from environment (default: INFO)
    level_name = os.environ.get("RADARCHART_QT_LOGLEVEL", "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)

    formatter = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    for name in ("radarchart_qt", "radarchart"):
        logger = logging.getLogger(name)
        logger.setLevel(level)

        # Only add handler if not already configured
        if not logger.handlers:
            handler = logging.StreamHandler()
            handler.setLevel(level)
            handler.setFormatter(formatter)
            logger.addHandler(handler)

    return logging.getLogger("radarchart_qt")


# Setup logging early
_logger = setup_logging()

from PySide6.QtGui import QAction
from PySide6.QtWidgets import QApplication, QMainWindow, QStatusBar, QToolBar

from radarchart.core.errors import RadarChartError
from radarchart.core.render_intent import GraphStyle
from radarchart.core.state import Event
from radarchart_qt.widgets import RadarChartWidget


SAMPLE_AXES = {
    "Speed": 12.0,
    "Power": 17.0,
    "Range": 8.0,
    "Armor": 14.0,
    "Agility": 10.0,
}

GRAPH_STYLE_CYCLE: List[GraphStyle] = [GraphStyle.STROKE, GraphStyle.FILL, GraphStyle.STROKE_AND_FILL]


def load_config(path: Optional[Path]) -> Dict[str, Any]:
    """Read a JSON config file; a missing path means defaults."""
    if path is None:
        return {}
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise RadarChartError(f"Config root must be an object: {path}", context={"path": str(path)})
    _logger.info(f"Loaded config from {path}")
    return data


# =============================================================================
# Main Window
# =============================================================================

class MainWindow(QMainWindow):
    """Demo window: one radar chart plus a toolbar of chart options."""

    def __init__(self, config: Optional[Dict[str, Any]] = None, sample: bool = True):
        super().__init__()
        self.setWindowTitle("Radar Chart")

        self.chart_widget = RadarChartWidget.from_config(config or {})
        self.setCentralWidget(self.chart_widget)
        self.chart = self.chart_widget.chart

        self._next_axis = 1
        self._setup_toolbar()
        self.setStatusBar(QStatusBar(self))

        self.chart.subscribe(self._on_chart_changed)
        if sample:
            self.chart.set_axis(SAMPLE_AXES)
        self._update_status()

    def _setup_toolbar(self):
        toolbar = QToolBar("Chart", self)
        toolbar.setObjectName("ChartToolbar")
        self.addToolBar(toolbar)

        add_action = QAction("Add Axis", self)
        add_action.triggered.connect(self._add_axis)
        toolbar.addAction(add_action)

        remove_action = QAction("Remove Axis", self)
        remove_action.triggered.connect(self._remove_last_axis)
        toolbar.addAction(remove_action)

        clear_action = QAction("Clear", self)
        clear_action.triggered.connect(lambda: self.chart.clear_axis())
        toolbar.addAction(clear_action)

        toolbar.addSeparator()

        self.circles_action = QAction("Circles Only", self)
        self.circles_action.setCheckable(True)
        self.circles_action.setChecked(self.chart.circles_only)
        self.circles_action.toggled.connect(self._set_circles_only)
        toolbar.addAction(self.circles_action)

        self.auto_size_action = QAction("Auto Size", self)
        self.auto_size_action.setCheckable(True)
        self.auto_size_action.setChecked(self.chart.auto_size)
        self.auto_size_action.toggled.connect(self._set_auto_size)
        toolbar.addAction(self.auto_size_action)

        self.smooth_action = QAction("Smooth Gradient", self)
        self.smooth_action.setCheckable(True)
        self.smooth_action.setChecked(self.chart.smooth_gradient)
        self.smooth_action.toggled.connect(self._set_smooth_gradient)
        toolbar.addAction(self.smooth_action)

        style_action = QAction("Graph Style", self)
        style_action.triggered.connect(self._cycle_graph_style)
        toolbar.addAction(style_action)

    # -------------------------------------------------------------------------
    # Actions
    # -------------------------------------------------------------------------

    def _add_axis(self):
        name = f"Axis {self._next_axis}"
        while name in self.chart.get_axis():
            self._next_axis += 1
            name = f"Axis {self._next_axis}"
        self._next_axis += 1
        self.chart.add_or_replace(name, round(random.uniform(1.0, 20.0), 1))

    def _remove_last_axis(self):
        names = list(self.chart.get_axis())
        if names:
            self.chart.remove(names[-1])

    def _set_circles_only(self, checked: bool):
        self.chart.circles_only = checked

    def _set_auto_size(self, checked: bool):
        self.chart.auto_size = checked

    def _set_smooth_gradient(self, checked: bool):
        self.chart.smooth_gradient = checked

    def _cycle_graph_style(self):
        index = GRAPH_STYLE_CYCLE.index(self.chart.graph_style)
        self.chart.graph_style = GRAPH_STYLE_CYCLE[(index + 1) % len(GRAPH_STYLE_CYCLE)]

    # -------------------------------------------------------------------------
    # Status
    # -------------------------------------------------------------------------

    def _on_chart_changed(self, event: Event):
        self._update_status()

    def _update_status(self):
        info = self.chart.describe()
        mode = "auto" if info["auto_size"] else "manual"
        self.statusBar().showMessage(
            f"{info['axis_count']} axes | max {info['axis_max']:g} ({mode}) | "
            f"tick {info['axis_tick']:g} | {info['ring_count']} rings ({info['ring_mode']}) | "
            f"style {self.chart.graph_style.value}"
        )


def parse_args(argv: List[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="radarchart_qt", description="Radar chart demo")
    parser.add_argument("--config", type=Path, default=None, help="JSON config with chart/layout sections")
    parser.add_argument("--empty", action="store_true", help="Start without sample axes")
    return parser.parse_args(argv)


def main():
    """Entry point for the Qt demo."""
    args = parse_args(sys.argv[1:])
    config = load_config(args.config)

    app = QApplication(sys.argv[:1])
    app.setApplicationName("Radar Chart")

    window = MainWindow(config=config, sample=not args.empty)
    window.resize(640, 600)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
