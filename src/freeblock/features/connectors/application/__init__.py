"""
Application layer for connectors feature.

Contains:
- plan_connectors / connectors_for_block - deduplicated, marker-annotated connectors
"""
from freeblock.features.connectors.application.connector_planner import (
    Connector,
    Marker,
    SOURCE_MARKER,
    TARGET_MARKER,
    pair_key,
    plan_connectors,
    connectors_for_block,
)

__all__ = [
    'Connector',
    'Marker',
    'SOURCE_MARKER',
    'TARGET_MARKER',
    'pair_key',
    'plan_connectors',
    'connectors_for_block',
]
