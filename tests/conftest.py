"""
Shared fixtures for FreeBlock tests.
"""
import pytest
from unittest.mock import MagicMock

from freeblock.application.bootstrap import initialize_services
from freeblock.application.events import EventBus
from freeblock.application.settings import GraphSettingsManager
from freeblock.features.blocks.infrastructure import InMemoryBlockRepository


@pytest.fixture(autouse=True)
def isolated_data_dir(tmp_path, monkeypatch):
    """Keep logs and documents out of the real user data directory"""
    monkeypatch.setenv("FREEBLOCK_DATA_DIR", str(tmp_path / "data"))


@pytest.fixture
def services():
    """Fully wired block graph services"""
    container = initialize_services()
    yield container
    container.cleanup()


@pytest.fixture
def graph(services):
    """BlockGraph facade over fresh services"""
    return services.facade


@pytest.fixture
def event_bus():
    return EventBus()


@pytest.fixture
def block_repo():
    return InMemoryBlockRepository()


@pytest.fixture
def settings():
    return GraphSettingsManager()


@pytest.fixture
def listener():
    """Mock event handler"""
    return MagicMock()
