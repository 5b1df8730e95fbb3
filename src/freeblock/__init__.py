"""
FreeBlock

Free-floating content blocks connected by single, reverse and double links,
with JSON import/export and connector geometry for renderers.

Usage:
    from freeblock import create_block_graph

    graph = create_block_graph()
    a = graph.create_block("Project Overview", "note")
    b = graph.create_block("Task 1", "task")
    graph.link_blocks(a.id, b.id, "double")
    document = graph.export_to_json()
"""
from freeblock.application.api import BlockGraph
from freeblock.application.bootstrap import ServiceContainer, initialize_services, create_block_graph
from freeblock.application.events import EventBus, DomainEvent
from freeblock.application.settings import GraphSettings
from freeblock.features.blocks.domain import Block, BlockLink, LinkType, Position, Size
from freeblock.features.links.domain import LinkIntent, LinkInfo
from freeblock.features.connectors.domain import (
    Point,
    Rect,
    ConnectorPath,
    anchor_point,
    control_points,
    connector_path,
)
from freeblock.features.connectors.application import Connector, Marker, plan_connectors

__version__ = "0.1.0"

__all__ = [
    'BlockGraph',
    'ServiceContainer',
    'initialize_services',
    'create_block_graph',
    'EventBus',
    'DomainEvent',
    'GraphSettings',
    'Block',
    'BlockLink',
    'LinkType',
    'Position',
    'Size',
    'LinkIntent',
    'LinkInfo',
    'Point',
    'Rect',
    'ConnectorPath',
    'anchor_point',
    'control_points',
    'connector_path',
    'Connector',
    'Marker',
    'plan_connectors',
]
