"""
Domain layer for blocks feature.

Contains:
- Block entity with Position, Size and BlockMetadata value objects
- LinkType value object and BlockLink table entry
- BlockRepository interface
"""
from freeblock.features.blocks.domain.block import (
    Block,
    BlockMetadata,
    Position,
    Size,
    generate_block_id,
)
from freeblock.features.blocks.domain.link_type import BlockLink, LinkType
from freeblock.features.blocks.domain.block_repository import BlockRepository

__all__ = [
    'Block',
    'BlockMetadata',
    'Position',
    'Size',
    'generate_block_id',
    'BlockLink',
    'LinkType',
    'BlockRepository',
]
