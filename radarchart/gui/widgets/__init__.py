"""Widgets package - uses lazy imports to avoid triggering Kivy initialization."""

from __future__ import annotations

from typing import Any

__all__ = ["RadarChartWidget", "KivyCanvasRenderer"]

# Lazy loading so that mesh.py and the core stay importable without Kivy


def __getattr__(name: str) -> Any:
    """Lazy load Kivy-dependent widgets on first access."""
    if name in ("RadarChartWidget", "KivyCanvasRenderer"):
        from radarchart.gui.widgets import radar_chart

        return getattr(radar_chart, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
