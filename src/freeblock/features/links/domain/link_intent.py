"""
Link intent value objects

A LinkIntent is what the user asks for; the stored edges are LinkType
entries on one or both blocks:

    SINGLE   A -> B        A.links[B] = single
    REVERSE  A <- B        B.links[A] = single
    DOUBLE   A <-> B       A.links[B] = double and B.links[A] = double
"""
from dataclasses import dataclass
from enum import Enum


class LinkIntent(Enum):
    """User-facing link direction"""
    SINGLE = "single"
    REVERSE = "reverse"
    DOUBLE = "double"
    
    @classmethod
    def from_string(cls, value) -> 'LinkIntent':
        """Create LinkIntent from string (case-insensitive)"""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise ValueError(f"Invalid link intent: {value!r}")
        try:
            return cls(value.lower())
        except ValueError:
            raise ValueError(f"Invalid link intent: {value}") from None


@dataclass(frozen=True)
class LinkInfo:
    """
    The link between two blocks as reconstructed from their link tables.
    
    from_id/to_id follow the edge that actually exists: a reverse link is
    reported as SINGLE with the caller's arguments swapped.
    """
    type: LinkIntent
    from_id: str
    to_id: str
    
    def to_dict(self) -> dict:
        return {"type": self.type.value, "from": self.from_id, "to": self.to_id}
