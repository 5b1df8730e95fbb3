"""Event system for application layer"""

from freeblock.application.events.events import (
    DomainEvent,
    # Block events
    BlockCreated,
    BlockUpdated,
    BlockMoved,
    BlockResized,
    BlockDeleted,
    # Link events
    BlocksLinked,
    BlocksUnlinked,
    # Graph events
    BlocksImported,
    BlocksArranged,
    ALL_EVENTS,
)
from freeblock.application.events.event_bus import EventBus

__all__ = [
    'DomainEvent',
    'EventBus',
    'ALL_EVENTS',
    # Block events
    'BlockCreated',
    'BlockUpdated',
    'BlockMoved',
    'BlockResized',
    'BlockDeleted',
    # Link events
    'BlocksLinked',
    'BlocksUnlinked',
    # Graph events
    'BlocksImported',
    'BlocksArranged',
]
