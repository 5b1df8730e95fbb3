"""
Document Service

Exports the graph store to a JSON document and rebuilds it from one.

Import is staged: the whole document is parsed and validated before the
store or settings are touched, so a malformed document returns False and
leaves the current graph exactly as it was.
"""
import json
from pathlib import Path
from typing import Any, Dict, List, Union

from freeblock.features.blocks.domain import Block, BlockRepository
from freeblock.features.documents.domain import (
    BLOCKS_KEY,
    SETTINGS_KEY,
    EXPORTED_AT_KEY,
    DocumentFormatError,
)
from freeblock.features.documents.infrastructure import read_document, write_document
from freeblock.application.events.event_bus import EventBus
from freeblock.application.events import BlocksImported
from freeblock.application.settings.graph_settings import GraphSettings, GraphSettingsManager
from freeblock.utils.clock import utc_timestamp
from freeblock.utils.message import Log


class DocumentService:
    """
    Service for graph import/export.

    Handles:
    - Building the export document (blocks, settings, exportedAt)
    - Importing documents in the current or the legacy link encoding
    - Reading and writing documents as JSON files
    """

    def __init__(
        self,
        block_repo: BlockRepository,
        settings: GraphSettingsManager,
        event_bus: EventBus
    ):
        """
        Initialize document service.

        Args:
            block_repo: Repository holding the blocks
            settings: Live graph settings, replaced on import
            event_bus: Event bus for publishing domain events
        """
        self._block_repo = block_repo
        self._settings = settings
        self._event_bus = event_bus
        Log.debug("DocumentService: Initialized")

    def export_to_json(self) -> Dict[str, Any]:
        """
        Export the graph as a document.

        Returns:
            {"blocks": [...], "settings": {...}, "exportedAt": "..."}
        """
        return {
            BLOCKS_KEY: [block.to_dict() for block in self._block_repo.list_all()],
            SETTINGS_KEY: self._settings.to_document(),
            EXPORTED_AT_KEY: utc_timestamp(),
        }

    def export_to_json_string(self, indent: int = 2) -> str:
        """Export the graph as a JSON string"""
        return json.dumps(self.export_to_json(), indent=indent, ensure_ascii=False)

    def import_from_json(self, document: Union[Dict[str, Any], str]) -> bool:
        """
        Replace the graph with the contents of a document.

        Args:
            document: Document dict, or its JSON text

        Returns:
            True on success; False if the document is malformed, in which
            case blocks and settings are unchanged
        """
        try:
            if isinstance(document, (str, bytes)):
                document = json.loads(document)
            settings, blocks = self._parse_document(document)
        except json.JSONDecodeError as e:
            Log.error(f"DocumentService: Import failed: invalid JSON ({e.msg}, line {e.lineno}, col {e.colno})")
            return False
        except (ValueError, TypeError, KeyError, AttributeError) as e:
            Log.error(f"DocumentService: Import failed: {type(e).__name__}: {e}")
            return False

        self._settings.replace(settings)
        self._block_repo.replace_all(blocks)

        self._event_bus.publish(BlocksImported(data={"count": len(blocks)}))
        Log.info(f"DocumentService: Imported {len(blocks)} blocks")
        return True

    def save_to_file(self, path: Union[str, Path]) -> Path:
        """
        Write the exported document to path.

        Returns:
            The path written
        """
        return write_document(path, self.export_to_json())

    def load_from_file(self, path: Union[str, Path]) -> bool:
        """
        Import a document from a JSON file.

        Returns:
            False if the file cannot be read or the document is malformed
        """
        try:
            document = read_document(path)
        except OSError as e:
            Log.error(f"DocumentService: Failed to read '{path}': {e}")
            return False
        except json.JSONDecodeError as e:
            Log.error(f"DocumentService: Invalid JSON in '{path}': {e.msg} (line {e.lineno}, col {e.colno})")
            return False
        return self.import_from_json(document)

    def _parse_document(self, document: Any):
        """
        Parse a document into (settings, blocks) without touching the store.

        Raises:
            DocumentFormatError: If the document shape is wrong
            ValueError, TypeError, KeyError: If a record is malformed
        """
        if not isinstance(document, dict):
            raise DocumentFormatError(f"Document must be an object, got {type(document).__name__}")

        records = document.get(BLOCKS_KEY)
        if not isinstance(records, list):
            raise DocumentFormatError(f"Document '{BLOCKS_KEY}' must be a list")

        settings: GraphSettings = self._settings.settings
        raw_settings = document.get(SETTINGS_KEY)
        if raw_settings:
            settings = self._settings.preview(raw_settings)
            unknown = settings.unknown_keys(raw_settings)
            if unknown:
                Log.warning(f"DocumentService: Ignoring unknown settings {unknown}")

        blocks: List[Block] = []
        seen_ids = set()
        for record in records:
            block = Block.from_dict(record)
            if block.id in seen_ids:
                raise DocumentFormatError(f"Duplicate block id '{block.id}'")
            seen_ids.add(block.id)
            blocks.append(block)

        for block in blocks:
            dangling = [target_id for target_id in block.links if target_id not in seen_ids]
            for target_id in dangling:
                del block.links[target_id]
            if dangling:
                Log.warning(f"DocumentService: Dropped {len(dangling)} links from '{block.id}' to unknown blocks")

        return settings, blocks
