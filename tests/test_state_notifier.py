# tests/test_state_notifier.py
"""Unit tests for StateNotifier, Event, and EventType.

Test categories:
- Basic functionality (subscribe, notify, unsubscribe)
- Safety (exception handling, duplicates)
- Snapshot semantics (unsubscribe during notify)
- Event immutability (frozen dataclass, MappingProxyType)
"""

import dataclasses
from types import MappingProxyType

import pytest

from radarchart.core.state import REDRAW_EVENTS, Event, EventType, StateNotifier


class TestStateNotifier:
    """StateNotifier unit tests."""

    def test_subscribe_and_notify(self) -> None:
        notifier = StateNotifier()
        received: list[Event] = []

        notifier.subscribe(EventType.GEOMETRY_CHANGED, received.append)
        notifier.notify(Event.create(EventType.GEOMETRY_CHANGED, {"reason": "axis"}))

        assert len(received) == 1
        assert received[0].event_type == EventType.GEOMETRY_CHANGED
        assert received[0].payload["reason"] == "axis"

    def test_unsubscribe(self) -> None:
        notifier = StateNotifier()
        received: list[Event] = []

        notifier.subscribe(EventType.STYLE_CHANGED, received.append)
        notifier.unsubscribe(EventType.STYLE_CHANGED, received.append)
        notifier.notify(Event.create(EventType.STYLE_CHANGED))

        assert received == []

    def test_unsubscribe_unknown_is_noop(self) -> None:
        notifier = StateNotifier()
        notifier.unsubscribe(EventType.STYLE_CHANGED, print)

    def test_notify_no_subscribers(self) -> None:
        StateNotifier().notify(Event.create(EventType.GEOMETRY_CHANGED))

    def test_event_types_are_separate(self) -> None:
        notifier = StateNotifier()
        geometry: list[Event] = []
        style: list[Event] = []
        notifier.subscribe(EventType.GEOMETRY_CHANGED, geometry.append)
        notifier.subscribe(EventType.STYLE_CHANGED, style.append)

        notifier.notify(Event.create(EventType.GEOMETRY_CHANGED))
        notifier.notify(Event.create(EventType.GEOMETRY_CHANGED))
        notifier.notify(Event.create(EventType.STYLE_CHANGED))

        assert len(geometry) == 2
        assert len(style) == 1

    def test_subscribe_all(self) -> None:
        notifier = StateNotifier()
        received: list[Event] = []
        notifier.subscribe_all(REDRAW_EVENTS, received.append)

        for event_type in REDRAW_EVENTS:
            notifier.notify(Event.create(event_type))

        assert [e.event_type for e in received] == list(REDRAW_EVENTS)

    def test_duplicate_subscription_ignored(self) -> None:
        notifier = StateNotifier()
        calls: list[int] = []

        def callback(event: Event) -> None:
            calls.append(1)

        notifier.subscribe(EventType.STYLE_CHANGED, callback)
        notifier.subscribe(EventType.STYLE_CHANGED, callback)
        notifier.notify(Event.create(EventType.STYLE_CHANGED))

        assert notifier.subscriber_count(EventType.STYLE_CHANGED) == 1
        assert len(calls) == 1

    def test_callback_exception_does_not_affect_others(self, caplog: pytest.LogCaptureFixture) -> None:
        notifier = StateNotifier()
        results: list[str] = []

        def bad_callback(event: Event) -> None:
            raise ValueError("Intentional error")

        def good_callback(event: Event) -> None:
            results.append("good")

        notifier.subscribe(EventType.GEOMETRY_CHANGED, bad_callback)
        notifier.subscribe(EventType.GEOMETRY_CHANGED, good_callback)

        with caplog.at_level("ERROR"):
            notifier.notify(Event.create(EventType.GEOMETRY_CHANGED))

        assert results == ["good"]
        assert "bad_callback" in caplog.text
        assert "Intentional error" in caplog.text

    def test_unsubscribe_during_notify_uses_snapshot(self) -> None:
        """A listener removed mid-notify still gets the current event, not the next."""
        notifier = StateNotifier()
        results: list[str] = []

        def second(event: Event) -> None:
            results.append("second")

        def first(event: Event) -> None:
            results.append("first")
            notifier.unsubscribe(EventType.STYLE_CHANGED, second)

        notifier.subscribe(EventType.STYLE_CHANGED, first)
        notifier.subscribe(EventType.STYLE_CHANGED, second)

        notifier.notify(Event.create(EventType.STYLE_CHANGED))
        notifier.notify(Event.create(EventType.STYLE_CHANGED))

        assert results == ["first", "second", "first"]


class TestEvent:
    """Event immutability."""

    def test_event_is_frozen(self) -> None:
        event = Event.create(EventType.GEOMETRY_CHANGED)
        with pytest.raises(dataclasses.FrozenInstanceError):
            event.event_type = EventType.STYLE_CHANGED  # type: ignore[misc]

    def test_payload_is_read_only(self) -> None:
        event = Event.create(EventType.STYLE_CHANGED, {"option": "axis_color"})
        assert isinstance(event.payload, MappingProxyType)
        with pytest.raises(TypeError):
            event.payload["option"] = "graph_color"  # type: ignore[index]

    def test_payload_is_copied(self) -> None:
        payload = {"option": "axis_color"}
        event = Event.create(EventType.STYLE_CHANGED, payload)
        payload["option"] = "changed"
        assert event.payload["option"] == "axis_color"

    def test_no_payload(self) -> None:
        assert Event.create(EventType.GEOMETRY_CHANGED).payload is None
