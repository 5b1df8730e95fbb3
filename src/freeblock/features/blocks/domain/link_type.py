"""
Link type value objects

The stored form of a link. Only SINGLE and DOUBLE are ever written to a
block's link table; the user-facing "reverse" intent is realised as a
SINGLE entry on the opposite block (see LinkIntent).
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class LinkType(Enum):
    """
    Stored edge type.
    
    - SINGLE: one-way edge from the owning block to the target
    - DOUBLE: one half of a bidirectional pair; the target holds the mirror entry
    """
    SINGLE = "single"
    DOUBLE = "double"
    
    @classmethod
    def from_string(cls, value: str) -> 'LinkType':
        """Create LinkType from string"""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise ValueError(f"Invalid link type: {value!r}")
        value_lower = value.lower()
        if value_lower == "single":
            return cls.SINGLE
        elif value_lower == "double":
            return cls.DOUBLE
        else:
            raise ValueError(f"Invalid link type: {value}")


@dataclass
class BlockLink:
    """
    One entry of a block's outgoing-link table.
    
    The target id is the table key, not a field, so an entry can never
    disagree with the id it is filed under.
    """
    type: LinkType = LinkType.SINGLE
    created_at: Optional[str] = None
    
    def to_dict(self, target_id: str) -> dict:
        """Serialize as a document link record"""
        return {
            "id": target_id,
            "type": self.type.value,
            "createdAt": self.created_at,
        }
