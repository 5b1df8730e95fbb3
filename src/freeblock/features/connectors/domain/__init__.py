"""
Domain layer for connectors feature.

Contains:
- Point, Rect value objects
- anchor_point / control_points / connector_path geometry functions
- ConnectorPath
"""
from freeblock.features.connectors.domain.geometry import (
    Point,
    Rect,
    ConnectorPath,
    anchor_point,
    control_points,
    connector_path,
    MAX_CONTROL_OFFSET,
)

__all__ = [
    'Point',
    'Rect',
    'ConnectorPath',
    'anchor_point',
    'control_points',
    'connector_path',
    'MAX_CONTROL_OFFSET',
]
