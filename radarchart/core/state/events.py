# radarchart/core/state/events.py
"""Event types and base Event class for redraw notification.

All events are frozen (immutable); payloads are wrapped in MappingProxyType.

Design Notes:
- MappingProxyType provides shallow immutability for payload
- Nested objects in payload are still mutable (shallow copy only)
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any


class EventType(Enum):
    """Event type enumeration.

    Both types mean "redraw needed"; they differ in what was recomputed.
    """

    GEOMETRY_CHANGED = "geometry_changed"  # Rings and vertex buffers rebuilt
    STYLE_CHANGED = "style_changed"  # Paint-only option changed (colors, widths, text size)


REDRAW_EVENTS = (EventType.GEOMETRY_CHANGED, EventType.STYLE_CHANGED)


def _freeze_payload(payload: dict[str, Any] | None) -> Mapping[str, Any] | None:
    """Convert payload to an immutable MappingProxyType (shallow copy)."""
    if payload is None:
        return None
    return MappingProxyType(dict(payload))


@dataclass(frozen=True)
class Event:
    """Base event class (immutable).

    Attributes:
        event_type: The type of event (from EventType enum)
        _payload: Internal storage for the frozen payload

    Example:
        >>> event = Event.create(EventType.STYLE_CHANGED, {"option": "axis_color"})
        >>> event.payload["option"]
        'axis_color'
    """

    event_type: EventType
    _payload: Mapping[str, Any] | None = field(default=None, repr=False)

    @classmethod
    def create(cls, event_type: EventType, payload: dict[str, Any] | None = None) -> "Event":
        """Factory method to create an Event with frozen payload."""
        return cls(event_type=event_type, _payload=_freeze_payload(payload))

    @property
    def payload(self) -> Mapping[str, Any] | None:
        """Read-only access to the payload."""
        return self._payload
