"""
Application layer for blocks feature.

Contains:
- BlockService - block lifecycle, layout and queries
"""
from freeblock.features.blocks.application.block_service import (
    BlockService,
    round_half_away_from_zero,
    snap_to_grid,
)

__all__ = [
    'BlockService',
    'round_half_away_from_zero',
    'snap_to_grid',
]
