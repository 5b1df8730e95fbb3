"""
Tests for the EventBus and domain events.

Tests subscription, synchronous dispatch order, duplicate registration and
isolation of failing handlers.
"""
import pytest
from unittest.mock import MagicMock

from freeblock.application.events import (
    ALL_EVENTS,
    BlockCreated,
    BlockDeleted,
    BlocksLinked,
    DomainEvent,
    EventBus,
)


# =============================================================================
# Domain Events
# =============================================================================

class TestDomainEvents:
    """Tests for event classes."""

    def test_wire_names(self):
        names = [event.name for event in ALL_EVENTS]
        assert names == [
            "blockCreated",
            "blockUpdated",
            "blockMoved",
            "blockResized",
            "blockDeleted",
            "blocksLinked",
            "blocksUnlinked",
            "blocksImported",
            "blocksArranged",
        ]

    def test_data_defaults_to_empty_dict(self):
        event = BlockDeleted()
        assert event.data == {}
        assert isinstance(event, DomainEvent)


# =============================================================================
# EventBus
# =============================================================================

class TestEventBus:
    """Tests for EventBus publish/subscribe."""

    def test_publish_reaches_subscriber(self, event_bus, listener):
        event_bus.subscribe("blockDeleted", listener)
        event = BlockDeleted(data={"id": "a"})
        event_bus.publish(event)
        listener.assert_called_once_with(event)

    def test_subscribe_by_class(self, event_bus, listener):
        event_bus.subscribe(BlockCreated, listener)
        event_bus.publish(BlockCreated(data={"block": None}))
        assert listener.call_count == 1

    def test_other_events_not_delivered(self, event_bus, listener):
        event_bus.subscribe("blockCreated", listener)
        event_bus.publish(BlockDeleted(data={"id": "a"}))
        listener.assert_not_called()

    def test_duplicate_subscription_ignored(self, event_bus, listener):
        event_bus.subscribe("blockDeleted", listener)
        event_bus.subscribe(BlockDeleted, listener)
        assert event_bus.get_subscriber_count("blockDeleted") == 1
        event_bus.publish(BlockDeleted())
        assert listener.call_count == 1

    def test_handlers_run_in_registration_order(self, event_bus):
        calls = []
        event_bus.subscribe("blocksLinked", lambda e: calls.append("first"))
        event_bus.subscribe("blocksLinked", lambda e: calls.append("second"))
        event_bus.publish(BlocksLinked())
        assert calls == ["first", "second"]

    def test_unsubscribe(self, event_bus, listener):
        event_bus.subscribe("blockDeleted", listener)
        event_bus.unsubscribe(BlockDeleted, listener)
        event_bus.publish(BlockDeleted())
        listener.assert_not_called()
        assert event_bus.get_subscriber_count(BlockDeleted) == 0

    def test_unsubscribe_unknown_handler_is_noop(self, event_bus, listener):
        event_bus.unsubscribe("blockDeleted", listener)
        assert event_bus.get_subscriber_count("blockDeleted") == 0

    def test_failing_handler_does_not_stop_dispatch(self, event_bus, listener):
        failing = MagicMock(side_effect=RuntimeError("boom"))
        event_bus.subscribe("blockDeleted", failing)
        event_bus.subscribe("blockDeleted", listener)

        event_bus.publish(BlockDeleted(data={"id": "a"}))

        failing.assert_called_once()
        listener.assert_called_once()

    def test_handler_may_unsubscribe_during_dispatch(self, event_bus, listener):
        def once(event):
            event_bus.unsubscribe("blockDeleted", once)

        event_bus.subscribe("blockDeleted", once)
        event_bus.subscribe("blockDeleted", listener)
        event_bus.publish(BlockDeleted())
        event_bus.publish(BlockDeleted())

        assert listener.call_count == 2
        assert event_bus.get_subscriber_count("blockDeleted") == 1

    def test_publish_all_keeps_order(self, event_bus):
        seen = []
        event_bus.subscribe("blockDeleted", lambda e: seen.append(e.data["id"]))
        event_bus.publish_all([BlockDeleted(data={"id": i}) for i in ("a", "b", "c")])
        assert seen == ["a", "b", "c"]

    def test_clear(self, event_bus, listener):
        event_bus.subscribe("blockDeleted", listener)
        event_bus.subscribe("blockCreated", listener)
        event_bus.clear()
        event_bus.publish(BlockDeleted())
        listener.assert_not_called()

    def test_publish_without_subscribers(self, event_bus):
        event_bus.publish(BlockDeleted())
