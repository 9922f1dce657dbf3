"""
Pytest configuration and shared fixtures for radar chart tests.

This module provides:
- Chart fixtures (empty, laid out, with sample axes)
- A redraw event recorder subscribed to the chart
"""

import pytest

from radarchart.core.chart_geometry import ChartGeometry
from tests.fakes import EventRecorder, RecordingRenderer


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

START = (0, 0, 0)
END = (200, 100, 50)
SAMPLE_AXES = {"A": 5.0, "B": 15.0, "C": 10.0}


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def chart():
    """Chart laid out with a 100px radius centered at (100, 100), no axes."""
    geometry = ChartGeometry(start_color=START, end_color=END)
    geometry.set_layout(100.0, (100.0, 100.0))
    return geometry


@pytest.fixture
def sample_chart(chart):
    """Laid-out chart with axes {A: 5, B: 15, C: 10} (auto-size on)."""
    chart.set_axis(SAMPLE_AXES)
    return chart


@pytest.fixture
def recorder(chart):
    """EventRecorder subscribed to the ``chart`` fixture."""
    events = EventRecorder()
    chart.subscribe(events)
    return events


@pytest.fixture
def renderer():
    return RecordingRenderer()
