"""
Domain layer for links feature.

Contains:
- LinkIntent value object (single / reverse / double)
- LinkInfo query result
"""
from freeblock.features.links.domain.link_intent import LinkIntent, LinkInfo

__all__ = [
    'LinkIntent',
    'LinkInfo',
]
