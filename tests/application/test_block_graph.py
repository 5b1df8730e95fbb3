"""
Tests for the BlockGraph facade and service bootstrap.

Exercises the public API end to end: block lifecycle, link intents, events
delivered to plain callbacks, documents and connector planning.
"""
import pytest
from unittest.mock import MagicMock

from freeblock import (
    BlockGraph,
    GraphSettings,
    LinkInfo,
    LinkIntent,
    Position,
    Size,
    create_block_graph,
    initialize_services,
)


# =============================================================================
# Bootstrap
# =============================================================================

class TestBootstrap:
    """Tests for initialize_services / create_block_graph."""

    def test_container_wires_facade(self, services):
        assert isinstance(services.facade, BlockGraph)
        assert services.facade.event_bus is services.event_bus

    def test_custom_settings(self):
        graph = create_block_graph(GraphSettings(grid_size=50))
        assert graph.settings.grid_size == 50

    def test_invalid_settings_rejected(self):
        with pytest.raises(ValueError):
            initialize_services(GraphSettings(grid_size=0))

    def test_graphs_are_independent(self):
        first = create_block_graph()
        second = create_block_graph()
        first.create_block("only here")
        assert second.get_all_blocks() == []

    def test_cleanup_drops_blocks_and_subscribers(self, services):
        callback = MagicMock()
        services.facade.on("blockCreated", callback)
        services.facade.create_block("a")
        services.cleanup()
        assert services.facade.get_all_blocks() == []
        assert services.event_bus.get_subscriber_count("blockCreated") == 0


# =============================================================================
# Behaviour through the facade
# =============================================================================

class TestGraphProperties:
    """Core guarantees of the block graph."""

    def test_auto_placement(self, graph):
        first = graph.create_block("a")
        second = graph.create_block("b")
        assert first.position == Position(50, 50)
        assert second.position == Position(350, 50)
        assert graph.get_auto_position() == Position(650, 50)

    def test_grid_snap(self, graph):
        block = graph.create_block("a")
        assert graph.set_block_position(block.id, 27, 33) is True
        assert graph.get_block(block.id).position == Position(20, 40)

    def test_snap_disabled(self, graph):
        block = graph.create_block("a")
        graph.set_block_position(block.id, 27, 33, snap_to_grid=False)
        assert block.position == Position(27, 33)

    def test_size_floor(self, graph):
        block = graph.create_block("a")
        graph.set_block_size(block.id, 10, 10)
        assert block.size == Size(150, 100)

    def test_content_and_search(self, graph):
        block = graph.create_block("Backend API", "task")
        graph.create_block("Frontend")
        graph.set_block_content(block.id, "Backend API v2")
        assert graph.search_blocks("api V2") == [block]

    def test_reverse_normalisation(self, graph):
        a = graph.create_block("a")
        b = graph.create_block("b")
        graph.link_blocks(a.id, b.id, "reverse")
        assert not a.has_link(b.id)
        assert b.get_link_type(a.id).value == "single"
        assert graph.get_link_info(a.id, b.id) == LinkInfo(LinkIntent.SINGLE, b.id, a.id)
        assert graph.get_incoming_links(a.id) == [b]
        assert graph.get_outgoing_links(b.id) == [a]

    def test_double_symmetry(self, graph):
        a = graph.create_block("a")
        b = graph.create_block("b")
        graph.link_blocks(a.id, b.id, LinkIntent.DOUBLE)
        assert a.get_link_type(b.id).value == "double"
        assert b.get_link_type(a.id).value == "double"
        graph.update_link_type(a.id, b.id, "single")
        assert graph.get_link_info(b.id, a.id) == LinkInfo(LinkIntent.SINGLE, a.id, b.id)

    def test_unlink(self, graph):
        a = graph.create_block("a")
        b = graph.create_block("b")
        graph.link_blocks(a.id, b.id, "double")
        assert graph.unlink_blocks(a.id, b.id) is True
        assert graph.get_link_info(a.id, b.id) is None

    def test_deletion_purge(self, graph):
        a = graph.create_block("a")
        b = graph.create_block("b")
        c = graph.create_block("c")
        graph.link_blocks(a.id, b.id, "single")
        graph.link_blocks(c.id, b.id, "double")

        assert graph.delete_block(b.id) is True

        assert graph.get_block(b.id) is None
        for block in graph.get_all_blocks():
            assert b.id not in block.links
        assert graph.get_link_info(a.id, b.id) is None

    def test_arrange(self, graph):
        blocks = [graph.create_block(str(i)) for i in range(4)]
        assert graph.arrange_blocks(3) == 4
        assert blocks[3].position == Position(60, 360)

    def test_unknown_ids_never_raise(self, graph):
        assert graph.set_block_position("x", 0, 0) is False
        assert graph.set_block_size("x", 0, 0) is False
        assert graph.set_block_content("x", "") is False
        assert graph.delete_block("x") is False
        assert graph.get_block("x") is None
        assert graph.link_blocks("x", "y") is False
        assert graph.unlink_blocks("x", "y") is False
        assert graph.get_link_info("x", "y") is None
        assert graph.get_incoming_links("x") == []
        assert graph.get_outgoing_links("x") == []


# =============================================================================
# Events
# =============================================================================

class TestGraphEvents:
    """Tests for on()/off() callbacks."""

    def test_callback_receives_payload(self, graph):
        callback = MagicMock()
        graph.on("blockCreated", callback)
        block = graph.create_block("a")
        callback.assert_called_once_with({"block": block})

    def test_event_sequence(self, graph):
        seen = []
        for name in ("blockCreated", "blocksLinked", "blockMoved", "blockDeleted"):
            graph.on(name, lambda data, name=name: seen.append(name))

        a = graph.create_block("a")
        b = graph.create_block("b")
        graph.link_blocks(a.id, b.id)
        graph.set_block_position(a.id, 100, 100)
        graph.delete_block(b.id)

        assert seen == ["blockCreated", "blockCreated", "blocksLinked", "blockMoved", "blockDeleted"]

    def test_off(self, graph):
        callback = MagicMock()
        graph.on("blockCreated", callback)
        graph.off("blockCreated", callback)
        graph.create_block("a")
        callback.assert_not_called()

    def test_off_unknown_callback_is_noop(self, graph):
        graph.off("blockCreated", MagicMock())

    def test_on_twice_registers_once(self, graph):
        callback = MagicMock()
        graph.on("blockCreated", callback)
        graph.on("blockCreated", callback)
        graph.create_block("a")
        assert callback.call_count == 1

    def test_failing_listener_does_not_break_mutation(self, graph):
        later = MagicMock()
        graph.on("blockCreated", MagicMock(side_effect=RuntimeError("listener bug")))
        graph.on("blockCreated", later)

        block = graph.create_block("a")

        assert graph.get_block(block.id) is block
        later.assert_called_once()

    def test_import_event(self, graph):
        callback = MagicMock()
        graph.on("blocksImported", callback)
        graph.import_from_json({"blocks": [{"id": "a"}, {"id": "b"}]})
        callback.assert_called_once_with({"count": 2})


# =============================================================================
# Documents and connectors
# =============================================================================

class TestDocumentsAndConnectors:
    """Tests for document and connector operations through the facade."""

    def test_round_trip_into_new_graph(self, graph):
        a = graph.create_block("a", "note")
        b = graph.create_block("b", "task")
        graph.link_blocks(a.id, b.id, "double")

        other = create_block_graph()
        assert other.import_from_json(graph.export_to_json_string()) is True

        assert [x.to_dict() for x in other.get_all_blocks()] == [x.to_dict() for x in graph.get_all_blocks()]
        assert other.get_link_info(a.id, b.id) == LinkInfo(LinkIntent.DOUBLE, a.id, b.id)

    def test_import_updates_settings(self, graph):
        graph.import_from_json({"blocks": [], "settings": {"gridSize": 25, "theme": "dark"}})
        assert graph.settings.grid_size == 25
        block = graph.create_block("a")
        graph.set_block_position(block.id, 30, 30)
        assert block.position == Position(25, 25)

    def test_failed_import_keeps_graph(self, graph):
        block = graph.create_block("a")
        assert graph.import_from_json('{"blocks": [{"content": "no id"}]}') is False
        assert graph.get_all_blocks() == [block]

    def test_file_round_trip(self, graph, tmp_path):
        graph.create_block("a")
        path = graph.save_to_file(tmp_path / "graph.json")
        other = create_block_graph()
        assert other.load_from_file(path) is True
        assert len(other.get_all_blocks()) == 1

    def test_connector_plan(self, graph):
        a = graph.create_block("a", position={"x": 0, "y": 0}, size={"width": 100, "height": 100})
        b = graph.create_block("b", position={"x": 300, "y": 0}, size={"width": 100, "height": 100})
        c = graph.create_block("c", position={"x": 0, "y": 300}, size={"width": 100, "height": 100})
        graph.link_blocks(a.id, b.id, "double")
        graph.link_blocks(a.id, c.id, "reverse")

        connectors = graph.plan_connectors()
        assert len(connectors) == 2
        assert connectors[0].path.to_svg() == "M 100 50 C 166.667 50, 233.333 50, 300 50"
        assert (connectors[1].source_id, connectors[1].target_id) == (c.id, a.id)

        assert [x.target_id for x in graph.connectors_for_block(b.id)] == [b.id]
