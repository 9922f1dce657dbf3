# radarchart/core/state/__init__.py
"""Redraw notification system for the radar chart core.

This package provides a decoupled change notification mechanism that is
toolkit-independent.

Public API:
    - EventType: Enum of event types (GEOMETRY_CHANGED, STYLE_CHANGED)
    - Event: Immutable event dataclass with optional payload
    - StateNotifier: Pub-sub notification system

Example:
    >>> from radarchart.core.state import EventType, Event, StateNotifier
    >>>
    >>> notifier = StateNotifier()
    >>>
    >>> def on_geometry(event):
    ...     print(f"Redraw: {event.payload}")
    >>>
    >>> notifier.subscribe(EventType.GEOMETRY_CHANGED, on_geometry)
    >>> notifier.notify(Event.create(EventType.GEOMETRY_CHANGED, {"axis_count": 3}))
    Redraw: {'axis_count': 3}
"""
from radarchart.core.state.events import REDRAW_EVENTS, Event, EventType
from radarchart.core.state.notifier import StateNotifier

__all__ = ["EventType", "Event", "StateNotifier", "REDRAW_EVENTS"]
