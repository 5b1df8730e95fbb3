"""
Infrastructure layer for documents feature.

Contains:
- read_document / write_document - JSON file helpers
"""
from freeblock.features.documents.infrastructure.document_file import read_document, write_document

__all__ = [
    'read_document',
    'write_document',
]
