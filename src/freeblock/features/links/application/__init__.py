"""
Application layer for links feature.

Contains:
- LinkService - applies and reports link intents between blocks
"""
from freeblock.features.links.application.link_service import LinkService

__all__ = [
    'LinkService',
]
