# radarchart/core/state/notifier.py
"""Redraw notification (pub-sub, toolkit-independent).

The chart core is single-threaded: the notifier takes no locks.

Snapshot Semantics:
- notify() takes a snapshot of the listener list before notification
- Listeners unsubscribed during notify() still receive the current event
- Next notify() will not call unsubscribed listeners

A failing listener is logged and skipped; the others still run.
"""

import logging
from collections.abc import Callable, Iterable

from radarchart.core.state.events import Event, EventType

logger = logging.getLogger(__name__)

Listener = Callable[[Event], None]


class StateNotifier:
    """Change notification system.

    Example:
        >>> notifier = StateNotifier()
        >>> notifier.subscribe(EventType.STYLE_CHANGED, lambda e: print(e.event_type.value))
        >>> notifier.notify(Event.create(EventType.STYLE_CHANGED))
        style_changed
    """

    def __init__(self) -> None:
        self._subscribers: dict[EventType, list[Listener]] = {}

    def subscribe(self, event_type: EventType, callback: Listener) -> None:
        """Subscribe a callback to an event type.

        Duplicate subscriptions are ignored (same callback won't be called twice).
        """
        callbacks = self._subscribers.setdefault(event_type, [])
        if callback not in callbacks:
            callbacks.append(callback)

    def subscribe_all(self, event_types: Iterable[EventType], callback: Listener) -> None:
        for event_type in event_types:
            self.subscribe(event_type, callback)

    def unsubscribe(self, event_type: EventType, callback: Listener) -> None:
        """Unsubscribe a callback. Unsubscribing a non-existent callback is a no-op."""
        callbacks = self._subscribers.get(event_type)
        if callbacks and callback in callbacks:
            callbacks.remove(callback)

    def notify(self, event: Event) -> None:
        """Notify all subscribers of an event."""
        # Snapshot: modifications during notification don't affect this round
        callbacks = list(self._subscribers.get(event.event_type, []))

        for callback in callbacks:
            try:
                callback(event)
            except Exception:
                cb_name = getattr(callback, "__name__", repr(callback))
                logger.exception("%s listener %s failed", event.event_type.value, cb_name)

    def subscriber_count(self, event_type: EventType) -> int:
        return len(self._subscribers.get(event_type, []))
