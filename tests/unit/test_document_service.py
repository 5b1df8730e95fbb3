"""
Tests for DocumentService.

Covers the export document, import of current and legacy link encodings,
settings merging, and the guarantee that a rejected document leaves the
graph untouched.
"""
import json

import pytest

from freeblock.application.events import BlocksImported
from freeblock.features.blocks.application import BlockService
from freeblock.features.blocks.domain import LinkType, Position, Size
from freeblock.features.documents.application import DocumentService
from freeblock.features.documents.infrastructure import read_document, write_document
from freeblock.features.links.application import LinkService


@pytest.fixture
def block_service(block_repo, settings, event_bus):
    return BlockService(block_repo, settings, event_bus)


@pytest.fixture
def link_service(block_repo, event_bus):
    return LinkService(block_repo, event_bus)


@pytest.fixture
def document_service(block_repo, settings, event_bus):
    return DocumentService(block_repo, settings, event_bus)


@pytest.fixture
def populated(block_service, link_service):
    """Three blocks: a -> b, b <-> c"""
    a = block_service.create_block("Alpha", "note")
    b = block_service.create_block("Beta", "task")
    c = block_service.create_block("Gamma")
    link_service.link_blocks(a.id, b.id, "single")
    link_service.link_blocks(b.id, c.id, "double")
    return a, b, c


def legacy_document():
    return {
        "blocks": [
            {"id": "one", "content": "First", "type": "note", "links": ["two"],
             "position": {"x": 10, "y": 20}},
            {"id": "two", "content": "Second", "links": []},
        ],
        "settings": {"gridSize": 10},
    }


# =============================================================================
# Export
# =============================================================================

class TestExport:
    """Tests for export_to_json."""

    def test_document_shape(self, document_service, populated):
        document = document_service.export_to_json()
        assert set(document) == {"blocks", "settings", "exportedAt"}
        assert [record["id"] for record in document["blocks"]] == [block.id for block in populated]
        assert document["settings"]["gridSize"] == 20
        assert document["exportedAt"].endswith("Z")

    def test_links_exported_as_records(self, document_service, populated):
        a, b, c = populated
        records = {record["id"]: record for record in document_service.export_to_json()["blocks"]}
        assert [(link["id"], link["type"]) for link in records[a.id]["links"]] == [(b.id, "single")]
        assert [(link["id"], link["type"]) for link in records[b.id]["links"]] == [(c.id, "double")]
        assert [(link["id"], link["type"]) for link in records[c.id]["links"]] == [(b.id, "double")]

    def test_string_export_is_json(self, document_service, populated):
        text = document_service.export_to_json_string()
        assert text.startswith("{\n  ")
        assert json.loads(text)["blocks"][0]["content"] == "Alpha"

    def test_empty_graph(self, document_service):
        assert document_service.export_to_json()["blocks"] == []


# =============================================================================
# Import
# =============================================================================

class TestImport:
    """Tests for import_from_json."""

    def test_round_trip(self, document_service, block_service, populated):
        document = document_service.export_to_json()
        before = [block.to_dict() for block in block_service.get_all_blocks()]

        assert document_service.import_from_json(document) is True

        after = [block.to_dict() for block in block_service.get_all_blocks()]
        assert after == before

    def test_round_trip_from_string(self, document_service, block_service, populated):
        text = document_service.export_to_json_string()
        block_service.create_block("extra")
        assert document_service.import_from_json(text) is True
        assert len(block_service.get_all_blocks()) == 3

    def test_legacy_links(self, document_service, block_service):
        assert document_service.import_from_json(legacy_document()) is True
        one = block_service.get_block("one")
        two = block_service.get_block("two")
        assert one.get_link_type("two") is LinkType.SINGLE
        assert one.position == Position(10, 20)
        assert two.position == Position(0, 0)
        assert two.size == Size(250, 150)

    def test_settings_merged_shallowly(self, document_service, settings):
        settings.apply({"defaultSpacing": 123})
        document_service.import_from_json(legacy_document())
        assert settings.grid_size == 10
        assert settings.default_spacing == 123

    def test_missing_settings_keep_current(self, document_service, settings):
        settings.apply({"gridSize": 40})
        assert document_service.import_from_json({"blocks": []}) is True
        assert settings.grid_size == 40

    def test_replaces_existing_blocks(self, document_service, block_service, populated):
        document_service.import_from_json(legacy_document())
        assert [block.id for block in block_service.get_all_blocks()] == ["one", "two"]

    def test_dangling_links_dropped(self, document_service, block_service):
        document = {"blocks": [{"id": "one", "links": ["two", "ghost"]}, {"id": "two"}]}
        assert document_service.import_from_json(document) is True
        assert block_service.get_block("one").linked_ids() == ["two"]

    @pytest.mark.parametrize("record", [
        {"id": "a", "content": 5},
        {"id": "a", "type": ["note"]},
    ])
    def test_non_string_content_or_type_rejected(self, document_service, block_service, populated, record):
        assert document_service.import_from_json({"blocks": [record]}) is False
        assert len(block_service.get_all_blocks()) == 3
        assert block_service.search_blocks("alpha") == [populated[0]]

    def test_null_content_and_type_fall_back(self, document_service, block_service):
        assert document_service.import_from_json({"blocks": [{"id": "a", "content": None, "type": None}]}) is True
        block = block_service.get_block("a")
        assert (block.content, block.type) == ("", "default")
        assert block_service.search_blocks("x") == []

    def test_publishes_count(self, document_service, event_bus, listener):
        event_bus.subscribe(BlocksImported, listener)
        document_service.import_from_json(legacy_document())
        assert listener.call_args[0][0].data == {"count": 2}

    @pytest.mark.parametrize("document", [
        "{not json",
        "[]",
        {"blocks": "nope"},
        {},
        {"blocks": [{"content": "no id"}]},
        {"blocks": [{"id": "a"}, {"id": "a"}]},
        {"blocks": [{"id": "a", "links": [{"id": "b", "type": "sideways"}]}, {"id": "b"}]},
        {"blocks": [{"id": "a", "size": {"width": "wide", "height": 1}}]},
        {"blocks": [], "settings": {"gridSize": 0}},
        {"blocks": [], "settings": ["gridSize"]},
    ])
    def test_malformed_document_leaves_state_unchanged(
        self, document_service, block_service, settings, populated, listener, event_bus, document
    ):
        event_bus.subscribe(BlocksImported, listener)
        before = document_service.export_to_json()

        assert document_service.import_from_json(document) is False

        after = document_service.export_to_json()
        assert after["blocks"] == before["blocks"]
        assert after["settings"] == before["settings"]
        listener.assert_not_called()


# =============================================================================
# Files
# =============================================================================

class TestDocumentFiles:
    """Tests for saving and loading documents on disk."""

    def test_save_and_load(self, document_service, block_service, populated, tmp_path):
        path = document_service.save_to_file(tmp_path / "nested" / "graph.json")
        assert path.exists()

        block_service.delete_block(populated[0].id)
        assert document_service.load_from_file(path) is True
        assert len(block_service.get_all_blocks()) == 3

    def test_file_is_readable_json(self, tmp_path):
        path = write_document(tmp_path / "doc.json", {"blocks": [], "note": "ü"})
        assert "ü" in path.read_text(encoding="utf-8")
        assert read_document(path) == {"blocks": [], "note": "ü"}

    def test_missing_file(self, document_service, tmp_path):
        assert document_service.load_from_file(tmp_path / "missing.json") is False

    def test_invalid_json_file(self, document_service, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{oops", encoding="utf-8")
        assert document_service.load_from_file(path) is False
