"""
Block Graph Facade

Unified interface for all block graph operations.
Used by renderers, the demo CLI and tests.

Mutations return booleans and queries return None / [] for unknown block
ids; callers are expected to check the result.
"""
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

from freeblock.application.events import DomainEvent
from freeblock.application.settings.graph_settings import GraphSettings
from freeblock.features.blocks.domain import Block, Position
from freeblock.features.links.domain import LinkIntent, LinkInfo
from freeblock.features.connectors.application import (
    Connector,
    plan_connectors,
    connectors_for_block,
)


class BlockGraph:
    """
    Unified interface for all block graph operations.

    Delegates to BlockService, LinkService and DocumentService and exposes
    the event bus through on()/off() for plain callbacks.
    """

    def __init__(self, services):
        """
        Initialize block graph facade.

        Args:
            services: ServiceContainer built by initialize_services()
        """
        self.services = services
        self.block_service = services.block_service
        self.link_service = services.link_service
        self.document_service = services.document_service
        self.event_bus = services.event_bus
        self._settings = services.settings
        # (event name, callback) -> bus handler, so off() can find the wrapper
        self._listeners: Dict[Tuple[str, Callable], Callable[[DomainEvent], None]] = {}

    @property
    def settings(self) -> GraphSettings:
        return self._settings.settings

    # ==================== Blocks ====================

    def create_block(
        self,
        content: str = "",
        block_type: str = "default",
        position: Optional[dict] = None,
        size: Optional[dict] = None
    ) -> Block:
        return self.block_service.create_block(content, block_type, position, size)

    def get_auto_position(self) -> Position:
        return self.block_service.get_auto_position()

    def set_block_position(self, block_id: str, x, y, snap_to_grid: bool = True) -> bool:
        return self.block_service.set_block_position(block_id, x, y, snap_to_grid)

    def set_block_size(self, block_id: str, width, height) -> bool:
        return self.block_service.set_block_size(block_id, width, height)

    def set_block_content(self, block_id: str, content: str) -> bool:
        return self.block_service.set_block_content(block_id, content)

    def delete_block(self, block_id: str) -> bool:
        return self.block_service.delete_block(block_id)

    def get_block(self, block_id: str) -> Optional[Block]:
        return self.block_service.get_block(block_id)

    def get_all_blocks(self) -> List[Block]:
        return self.block_service.get_all_blocks()

    def search_blocks(self, query: str) -> List[Block]:
        return self.block_service.search_blocks(query)

    def get_incoming_links(self, block_id: str) -> List[Block]:
        return self.block_service.get_incoming_links(block_id)

    def get_outgoing_links(self, block_id: str) -> List[Block]:
        return self.block_service.get_outgoing_links(block_id)

    def arrange_blocks(self, columns: int = 3) -> int:
        return self.block_service.arrange_blocks(columns)

    # ==================== Links ====================

    def link_blocks(
        self,
        from_id: str,
        to_id: str,
        link_type: Union[LinkIntent, str] = LinkIntent.SINGLE
    ) -> bool:
        return self.link_service.link_blocks(from_id, to_id, link_type)

    def update_link_type(self, from_id: str, to_id: str, new_link_type: Union[LinkIntent, str]) -> bool:
        return self.link_service.update_link_type(from_id, to_id, new_link_type)

    def unlink_blocks(self, from_id: str, to_id: str) -> bool:
        return self.link_service.unlink_blocks(from_id, to_id)

    def get_link_info(self, from_id: str, to_id: str) -> Optional[LinkInfo]:
        return self.link_service.get_link_info(from_id, to_id)

    # ==================== Documents ====================

    def export_to_json(self) -> Dict[str, Any]:
        return self.document_service.export_to_json()

    def export_to_json_string(self, indent: int = 2) -> str:
        return self.document_service.export_to_json_string(indent)

    def import_from_json(self, document: Union[Dict[str, Any], str]) -> bool:
        return self.document_service.import_from_json(document)

    def save_to_file(self, path: Union[str, Path]) -> Path:
        return self.document_service.save_to_file(path)

    def load_from_file(self, path: Union[str, Path]) -> bool:
        return self.document_service.load_from_file(path)

    # ==================== Connectors ====================

    def plan_connectors(self) -> List[Connector]:
        return plan_connectors(self.get_all_blocks())

    def connectors_for_block(self, block_id: str) -> List[Connector]:
        return connectors_for_block(self.get_all_blocks(), block_id)

    # ==================== Events ====================

    def on(self, event_name: str, callback: Callable[[Dict[str, Any]], None]) -> None:
        """
        Call callback(event.data) every time event_name is published.

        Registering the same callback twice for one event has no effect.
        """
        key = (event_name, callback)
        if key in self._listeners:
            return

        def handler(event: DomainEvent) -> None:
            callback(event.data)

        self._listeners[key] = handler
        self.event_bus.subscribe(event_name, handler)

    def off(self, event_name: str, callback: Callable[[Dict[str, Any]], None]) -> None:
        """Stop calling callback for event_name (no-op if not registered)"""
        handler = self._listeners.pop((event_name, callback), None)
        if handler is not None:
            self.event_bus.unsubscribe(event_name, handler)
