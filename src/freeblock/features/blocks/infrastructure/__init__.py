"""
Infrastructure layer for blocks feature.

Contains:
- InMemoryBlockRepository - dict-backed implementation of BlockRepository
"""
from freeblock.features.blocks.infrastructure.block_repository_impl import InMemoryBlockRepository

__all__ = [
    'InMemoryBlockRepository',
]
