"""
Public API of the block graph.

Contains:
- BlockGraph - facade over the block, link and document services
"""
from freeblock.application.api.block_graph import BlockGraph

__all__ = [
    'BlockGraph',
]
