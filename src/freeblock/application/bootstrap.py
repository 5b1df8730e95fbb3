"""
Application Bootstrap

Centralized service initialization and dependency injection.
Wires one graph store: repository, settings, event bus, services and facade.
"""
from typing import Optional

from freeblock.application.events.event_bus import EventBus
from freeblock.application.settings.graph_settings import GraphSettings, GraphSettingsManager
from freeblock.features.blocks.domain import BlockRepository
from freeblock.features.blocks.infrastructure import InMemoryBlockRepository
from freeblock.features.blocks.application import BlockService
from freeblock.features.links.application import LinkService
from freeblock.features.documents.application import DocumentService
from freeblock.utils.message import Log


class ServiceContainer:
    """Container for the services of one block graph"""

    def __init__(
        self,
        event_bus: EventBus,
        settings: GraphSettingsManager,
        block_repo: BlockRepository,
        block_service: BlockService,
        link_service: LinkService,
        document_service: DocumentService,
    ):
        self.event_bus = event_bus
        self.settings = settings
        self.block_repo = block_repo
        self.block_service = block_service
        self.link_service = link_service
        self.document_service = document_service
        self.facade = None

    def cleanup(self) -> None:
        """Drop subscribers and blocks; the container is unusable afterwards"""
        self.event_bus.clear()
        self.block_repo.replace_all([])
        Log.debug("ServiceContainer: Cleanup complete")


def initialize_services(
    settings: Optional[GraphSettings] = None,
    event_bus: Optional[EventBus] = None,
    block_repo: Optional[BlockRepository] = None,
) -> ServiceContainer:
    """
    Build every service of a block graph.

    Args:
        settings: Initial graph settings (defaults when None)
        event_bus: Shared event bus (a new one when None)
        block_repo: Block storage (in-memory when None)

    Returns:
        ServiceContainer with its facade attached

    Raises:
        ValueError: If settings fail validation
    """
    from freeblock.application.api.block_graph import BlockGraph

    event_bus = event_bus or EventBus()
    settings_manager = GraphSettingsManager(settings)
    block_repo = block_repo or InMemoryBlockRepository()

    services = ServiceContainer(
        event_bus=event_bus,
        settings=settings_manager,
        block_repo=block_repo,
        block_service=BlockService(block_repo, settings_manager, event_bus),
        link_service=LinkService(block_repo, event_bus),
        document_service=DocumentService(block_repo, settings_manager, event_bus),
    )
    services.facade = BlockGraph(services)
    Log.debug("Bootstrap: Block graph services initialized")
    return services


def create_block_graph(settings: Optional[GraphSettings] = None):
    """Shortcut for initialize_services(settings).facade"""
    return initialize_services(settings).facade
