"""
Application layer for documents feature.

Contains:
- DocumentService - graph export/import and document files
"""
from freeblock.features.documents.application.document_service import DocumentService

__all__ = [
    'DocumentService',
]
