"""
Block entity

Represents a free-floating content node on the canvas.
A block owns its position, size, timestamps and its own outgoing-link table;
links are keyed by target block id.

Only the store mutates blocks, and every mutation goes through the setters
below so metadata.updated_at stays current.
"""
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union
import time
import uuid

from freeblock.features.blocks.domain.link_type import BlockLink, LinkType
from freeblock.utils.clock import utc_timestamp

Number = Union[int, float]

# Size given to a block by the constructor
DEFAULT_BLOCK_WIDTH = 250
DEFAULT_BLOCK_HEIGHT = 250

# Size given to an imported record that has no "size"
IMPORT_FALLBACK_WIDTH = 250
IMPORT_FALLBACK_HEIGHT = 150


def generate_block_id() -> str:
    """Unique block id: block_<epoch-ms>_<9 random hex chars>"""
    return f"block_{int(time.time() * 1000)}_{uuid.uuid4().hex[:9]}"


def _require_number(value, name: str) -> Number:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{name} must be a number, got {value!r}")
    return value


@dataclass
class Position:
    """Top-left corner of a block in canvas coordinates"""
    x: Number = 0
    y: Number = 0
    
    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y}
    
    @classmethod
    def from_dict(cls, data: dict) -> 'Position':
        return cls(
            x=_require_number(data["x"], "position.x"),
            y=_require_number(data["y"], "position.y"),
        )


@dataclass
class Size:
    """Block dimensions in canvas units"""
    width: Number = DEFAULT_BLOCK_WIDTH
    height: Number = DEFAULT_BLOCK_HEIGHT
    
    def to_dict(self) -> dict:
        return {"width": self.width, "height": self.height}
    
    @classmethod
    def from_dict(cls, data: dict) -> 'Size':
        return cls(
            width=_require_number(data["width"], "size.width"),
            height=_require_number(data["height"], "size.height"),
        )


@dataclass
class BlockMetadata:
    """Creation and last-modification timestamps (ISO-8601 UTC)"""
    created_at: str = field(default_factory=utc_timestamp)
    updated_at: str = field(default_factory=utc_timestamp)
    
    def touch(self) -> None:
        self.updated_at = utc_timestamp()
    
    def to_dict(self) -> dict:
        return {"createdAt": self.created_at, "updatedAt": self.updated_at}
    
    @classmethod
    def from_dict(cls, data: dict) -> 'BlockMetadata':
        now = utc_timestamp()
        return cls(
            created_at=data.get("createdAt") or now,
            updated_at=data.get("updatedAt") or now,
        )


@dataclass
class Block:
    """
    Block entity - a content node with its outgoing links.
    
    A block has:
    - Identity (id, immutable once assigned)
    - Content (free text) and a free-form type tag ("default", "note", "task", ...)
    - Position and size on the canvas
    - Outgoing links: Dict[target_id, BlockLink]
    - Metadata timestamps
    
    Links only ever hold LinkType.SINGLE or LinkType.DOUBLE.
    """
    id: str
    content: str = ""
    type: str = "default"
    position: Position = field(default_factory=Position)
    size: Size = field(default_factory=Size)
    links: Dict[str, BlockLink] = field(default_factory=dict)
    metadata: BlockMetadata = field(default_factory=BlockMetadata)
    
    def __post_init__(self):
        """Validate identity"""
        if not self.id:
            raise ValueError("Block ID cannot be empty")
        if self.content is None:
            self.content = ""
        if not self.type:
            self.type = "default"
    
    def set_content(self, content: str) -> None:
        self.content = content
        self.metadata.touch()
    
    def set_position(self, x: Number, y: Number) -> None:
        self.position.x = x
        self.position.y = y
        self.metadata.touch()
    
    def set_size(self, width: Number, height: Number) -> None:
        self.size.width = width
        self.size.height = height
        self.metadata.touch()
    
    def add_link(self, block_id: str, link_type: LinkType = LinkType.SINGLE) -> None:
        """
        Add or replace the outgoing link to block_id.
        
        Args:
            block_id: Target block ID
            link_type: LinkType (or its string value)
        """
        self.links[block_id] = BlockLink(
            type=LinkType.from_string(link_type),
            created_at=utc_timestamp()
        )
        self.metadata.touch()
    
    def remove_link(self, block_id: str) -> None:
        """Remove the outgoing link to block_id (no-op if absent)"""
        self.links.pop(block_id, None)
        self.metadata.touch()
    
    def has_link(self, block_id: str) -> bool:
        return block_id in self.links
    
    def get_link_type(self, block_id: str) -> Optional[LinkType]:
        link = self.links.get(block_id)
        return link.type if link else None
    
    def linked_ids(self) -> List[str]:
        """Target ids in link-table order"""
        return list(self.links.keys())
    
    def to_dict(self) -> dict:
        """
        Convert to a document block record.
        
        Links are flattened from the table into a list in insertion order.
        """
        return {
            "id": self.id,
            "content": self.content,
            "type": self.type,
            "links": [link.to_dict(target_id) for target_id, link in self.links.items()],
            "position": self.position.to_dict(),
            "size": self.size.to_dict(),
            "metadata": self.metadata.to_dict(),
        }
    
    @classmethod
    def from_dict(cls, data: dict) -> 'Block':
        """
        Create from a document block record.
        
        Accepts both link encodings:
        - legacy: a bare target id string, read as a SINGLE link created now
        - current: {"id", "type", "createdAt"}, type defaulting to SINGLE
        
        Missing position falls back to (0, 0), missing size to 250x150,
        missing metadata to fresh timestamps.
        
        Raises:
            ValueError, TypeError, KeyError: If the record is malformed
        """
        if not isinstance(data, dict):
            raise TypeError(f"Block record must be an object, got {type(data).__name__}")
        
        block_id = data["id"]
        if not isinstance(block_id, str):
            raise ValueError(f"Block ID must be a string, got {block_id!r}")
        
        content = data.get("content", "")
        block_type = data.get("type", "default")
        if content is not None and not isinstance(content, str):
            raise ValueError(f"Block '{block_id}' content must be a string, got {type(content).__name__}")
        if block_type is not None and not isinstance(block_type, str):
            raise ValueError(f"Block '{block_id}' type must be a string, got {type(block_type).__name__}")
        
        links: Dict[str, BlockLink] = {}
        raw_links = data.get("links") or []
        if not isinstance(raw_links, list):
            raise ValueError(f"Block '{block_id}' links must be a list")
        for link in raw_links:
            if isinstance(link, str):
                links[link] = BlockLink(type=LinkType.SINGLE, created_at=utc_timestamp())
            elif isinstance(link, dict):
                links[link["id"]] = BlockLink(
                    type=LinkType.from_string(link.get("type") or "single"),
                    created_at=link.get("createdAt")
                )
            else:
                raise ValueError(f"Block '{block_id}' has an invalid link entry: {link!r}")
        
        position = data.get("position")
        size = data.get("size")
        metadata = data.get("metadata")
        
        return cls(
            id=block_id,
            content=content,
            type=block_type,
            position=Position.from_dict(position) if position else Position(0, 0),
            size=Size.from_dict(size) if size else Size(IMPORT_FALLBACK_WIDTH, IMPORT_FALLBACK_HEIGHT),
            links=links,
            metadata=BlockMetadata.from_dict(metadata) if metadata else BlockMetadata(),
        )
    
    def __str__(self) -> str:
        return f"{self.id} [{self.type}] @ ({self.position.x}, {self.position.y})"
