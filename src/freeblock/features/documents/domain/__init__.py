"""
Domain layer for documents feature.

Contains:
- Document key constants
- DocumentFormatError
"""
from freeblock.features.documents.domain.document import (
    BLOCKS_KEY,
    SETTINGS_KEY,
    EXPORTED_AT_KEY,
    DocumentFormatError,
)

__all__ = [
    'BLOCKS_KEY',
    'SETTINGS_KEY',
    'EXPORTED_AT_KEY',
    'DocumentFormatError',
]
