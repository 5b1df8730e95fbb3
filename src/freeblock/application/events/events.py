"""
Domain Events

Events that represent changes to the block graph.
Used to keep renderers and other observers in sync with the store.

Each event's `name` is the wire name observers subscribe to.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict


@dataclass
class DomainEvent:
    """Base class for all domain events"""
    name: ClassVar[str] = "DomainEvent"
    data: Dict[str, Any] = field(default_factory=dict)


# Block Events
@dataclass
class BlockCreated(DomainEvent):
    """
    Raised after a block is added to the store.

    Data fields:
        - block: the created Block
    """
    name: ClassVar[str] = "blockCreated"


@dataclass
class BlockUpdated(DomainEvent):
    """Content changed. Data fields: block"""
    name: ClassVar[str] = "blockUpdated"


@dataclass
class BlockMoved(DomainEvent):
    """Position changed. Data fields: block"""
    name: ClassVar[str] = "blockMoved"


@dataclass
class BlockResized(DomainEvent):
    """Size changed. Data fields: block"""
    name: ClassVar[str] = "blockResized"


@dataclass
class BlockDeleted(DomainEvent):
    """
    Raised after a block and every link pointing at it are gone.

    Data fields:
        - id: ID of the removed block
    """
    name: ClassVar[str] = "blockDeleted"


# Link Events
@dataclass
class BlocksLinked(DomainEvent):
    """
    Raised after a link intent is applied between two blocks.

    Data fields:
        - from: source Block
        - to: target Block
        - link_type: the LinkIntent that was applied
    """
    name: ClassVar[str] = "blocksLinked"


@dataclass
class BlocksUnlinked(DomainEvent):
    """Data fields: from_id, to_id"""
    name: ClassVar[str] = "blocksUnlinked"


# Graph Events
@dataclass
class BlocksImported(DomainEvent):
    """Data fields: count"""
    name: ClassVar[str] = "blocksImported"


@dataclass
class BlocksArranged(DomainEvent):
    """Data fields: count"""
    name: ClassVar[str] = "blocksArranged"


ALL_EVENTS = (
    BlockCreated,
    BlockUpdated,
    BlockMoved,
    BlockResized,
    BlockDeleted,
    BlocksLinked,
    BlocksUnlinked,
    BlocksImported,
    BlocksArranged,
)
