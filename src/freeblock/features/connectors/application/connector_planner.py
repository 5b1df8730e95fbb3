"""
Connector Planner

Turns block link tables into the list of connectors a renderer draws.

A double link lives in both blocks' tables but is one line on screen, so
connectors are deduplicated by the unordered pair of block ids. Each
connector carries its endpoint markers:

- double: two "target" markers, one at each end (one per direction)
- single: a "source" marker at the start and a "target" marker at the end
"""
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Tuple

from freeblock.features.blocks.domain import Block, LinkType
from freeblock.features.connectors.domain.geometry import ConnectorPath, Point, Rect, connector_path

SOURCE_MARKER = "source"
TARGET_MARKER = "target"


@dataclass(frozen=True)
class Marker:
    """Endpoint marker drawn where a connector meets a block"""
    kind: str
    point: Point
    from_id: str
    to_id: str

    def to_dict(self) -> dict:
        return {"kind": self.kind, "point": self.point.to_dict(), "from": self.from_id, "to": self.to_id}


@dataclass
class Connector:
    """One drawable line between two linked blocks"""
    source_id: str
    target_id: str
    link_type: LinkType
    path: ConnectorPath
    markers: List[Marker] = field(default_factory=list)

    @property
    def pair_key(self) -> Tuple[str, str]:
        return pair_key(self.source_id, self.target_id)

    def touches(self, block_id: str) -> bool:
        return block_id in (self.source_id, self.target_id)

    def to_dict(self) -> dict:
        return {
            "source": self.source_id,
            "target": self.target_id,
            "type": self.link_type.value,
            "path": self.path.to_svg(),
            "markers": [marker.to_dict() for marker in self.markers],
        }


def pair_key(first_id: str, second_id: str) -> Tuple[str, str]:
    """Order-independent key for a pair of block ids"""
    return (first_id, second_id) if first_id <= second_id else (second_id, first_id)


def _markers_for(source_id: str, target_id: str, link_type: LinkType, path: ConnectorPath) -> List[Marker]:
    if link_type is LinkType.DOUBLE:
        return [
            Marker(TARGET_MARKER, path.end, source_id, target_id),
            Marker(TARGET_MARKER, path.start, target_id, source_id),
        ]
    return [
        Marker(SOURCE_MARKER, path.start, source_id, target_id),
        Marker(TARGET_MARKER, path.end, source_id, target_id),
    ]


def plan_connectors(blocks: Iterable[Block]) -> List[Connector]:
    """
    One connector per linked pair of blocks, in link-table order.

    Links whose target is not among blocks are skipped.
    """
    blocks = list(blocks)
    by_id: Dict[str, Block] = {block.id: block for block in blocks}
    drawn = set()
    connectors: List[Connector] = []

    for block in blocks:
        for target_id, link in block.links.items():
            target = by_id.get(target_id)
            if target is None:
                continue
            key = pair_key(block.id, target_id)
            if key in drawn:
                continue
            drawn.add(key)

            path = connector_path(Rect.from_block(block), Rect.from_block(target))
            connectors.append(Connector(
                source_id=block.id,
                target_id=target_id,
                link_type=link.type,
                path=path,
                markers=_markers_for(block.id, target_id, link.type, path),
            ))

    return connectors


def connectors_for_block(blocks: Iterable[Block], block_id: str) -> List[Connector]:
    """Connectors touching block_id, e.g. to reroute after it moved"""
    return [connector for connector in plan_connectors(blocks) if connector.touches(block_id)]
