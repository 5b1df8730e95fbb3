"""
FreeBlock demo CLI

Builds the sample project graph (a hub note, three tasks, resources and
dependencies joined by single, reverse and double links) and prints it.

Usage (from repo root):
    freeblock-demo                          # exported document on stdout
    freeblock-demo --connectors             # connector plan on stdout
    freeblock-demo --output graph.json      # also save the document
    freeblock-demo --load graph.json        # start from a saved document

stdout carries only JSON; log output goes to stderr.
"""
import argparse
import json
import logging
import sys
from typing import List, Optional

from freeblock.application.bootstrap import initialize_services
from freeblock.utils.message import Log


def build_sample_graph(graph) -> list:
    """Populate graph with the sample project; returns the created blocks in order."""
    overview = graph.create_block(
        "Project Overview\n\nThis is the main project hub with links to all components.",
        "note", {"x": 400, "y": 100})
    design = graph.create_block(
        "Task 1: Design UI\n\nCreate mockups and wireframes for the user interface.",
        "task", {"x": 100, "y": 300})
    backend = graph.create_block(
        "Task 2: Backend API\n\nDevelop RESTful API endpoints for data management.",
        "task", {"x": 400, "y": 300})
    testing = graph.create_block(
        "Task 3: Testing\n\nWrite unit tests and integration tests.",
        "task", {"x": 700, "y": 300})
    resources = graph.create_block(
        "Resources\n\n- Documentation\n- API Reference\n- Design Guidelines",
        "note", {"x": 250, "y": 500})
    dependencies = graph.create_block(
        "Dependencies\n\nExternal libraries and frameworks used in the project.",
        "note", {"x": 550, "y": 500})

    graph.link_blocks(overview.id, design.id, "single")
    graph.link_blocks(overview.id, backend.id, "single")
    graph.link_blocks(overview.id, testing.id, "single")
    graph.link_blocks(design.id, backend.id, "single")
    graph.link_blocks(backend.id, testing.id, "single")
    graph.link_blocks(resources.id, overview.id, "reverse")
    graph.link_blocks(dependencies.id, backend.id, "double")

    return [overview, design, backend, testing, resources, dependencies]


def _redirect_logging_to_stderr() -> None:
    """Keep stdout clean for JSON output."""
    for handler in Log.get_logger().handlers:
        if isinstance(handler, logging.StreamHandler) and handler.stream is sys.stdout:
            handler.stream = sys.stderr


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="freeblock-demo",
        description="Build the sample FreeBlock graph and print it as JSON."
    )
    parser.add_argument("--load", metavar="PATH", help="Import a saved document instead of building the sample")
    parser.add_argument("--arrange", type=int, metavar="COLUMNS", help="Arrange blocks in a grid before printing")
    parser.add_argument("--output", metavar="PATH", help="Also write the exported document to PATH")
    parser.add_argument("--connectors", action="store_true", help="Print the connector plan instead of the document")
    parser.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING or ERROR")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = create_parser().parse_args(argv)

    _redirect_logging_to_stderr()
    if args.log_level:
        Log.set_level(args.log_level)

    if args.arrange is not None and args.arrange < 1:
        Log.error(f"--arrange needs at least 1 column, got {args.arrange}")
        return 2

    container = initialize_services()
    try:
        graph = container.facade

        if args.load:
            if not graph.load_from_file(args.load):
                Log.error(f"Could not load document from {args.load}")
                return 1
        else:
            build_sample_graph(graph)

        if args.arrange is not None:
            graph.arrange_blocks(args.arrange)

        if args.output:
            graph.save_to_file(args.output)

        if args.connectors:
            plan = [connector.to_dict() for connector in graph.plan_connectors()]
            print(json.dumps(plan, indent=2, ensure_ascii=False))
        else:
            print(graph.export_to_json_string())
        return 0
    finally:
        container.cleanup()


if __name__ == "__main__":
    sys.exit(main())
