"""Command-line interface for shortestpath."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from time import perf_counter
from typing import Any, List, Optional

from shortestpath.algorithms.base import TieBreak
from shortestpath.algorithms.spf import shortest_path
from shortestpath.config import SEARCH_CONFIG
from shortestpath.graph import Graph
from shortestpath.io import load_graph_file
from shortestpath.logging import get_logger, set_global_log_level

logger = get_logger(__name__)

_TIE_BREAKS = {
    "key": TieBreak.KEY_ORDER,
    "insertion": TieBreak.INSERTION_ORDER,
}


def _format_table(
    headers: List[str],
    rows: List[List[Any]],
    min_width: int = 8,
) -> str:
    """Format rows as a plain ASCII table.

    Args:
        headers: Column headers.
        rows: Data rows, one list per row.
        min_width: Minimum column width.

    Returns:
        The table, or an empty string when there are no rows.
    """
    if not rows:
        return ""

    all_data = [headers] + rows
    col_widths = [
        max(max(len(str(row[col])) for row in all_data), min_width)
        for col in range(len(headers))
    ]

    def format_row(row_data: List[Any]) -> str:
        return "   " + " | ".join(
            f"{str(item):<{col_widths[i]}}" for i, item in enumerate(row_data)
        )

    lines = [format_row(headers)]
    lines.append("   " + "-+-".join("-" * width for width in col_widths))
    lines.extend(format_row(row) for row in rows)
    return "\n".join(lines)


def _load(path: Path, action: str) -> Graph:
    try:
        return load_graph_file(path)
    except FileNotFoundError:
        print(f"❌ ERROR: Graph file not found: {path}")
        sys.exit(1)
    except (ValueError, OSError) as e:
        logger.error(f"Failed to {action}: {e}")
        print(f"❌ ERROR: Failed to {action}")
        print(f"  {type(e).__name__}: {e}")
        sys.exit(1)


def _find_path(
    path: Path,
    start: str,
    goal: str,
    connector: Optional[str],
    edges: bool,
    as_json: bool,
    tie_break: Optional[str],
) -> None:
    """Load a graph and print the shortest path between two nodes.

    Exits with status 1 if the graph cannot be loaded or no path exists.
    """
    logger.info(f"Loading graph from: {path}")
    graph = _load(path, "load graph")

    _start_time = perf_counter()
    result = shortest_path(
        graph, start, goal, tie_break=_TIE_BREAKS[tie_break] if tie_break else None
    )
    logger.info(
        f"Searched {start} -> {goal} in {perf_counter() - _start_time:.3f} seconds"
    )

    if as_json:
        print(json.dumps(result.to_dict(), indent=2))
    elif result.is_reachable:
        rendered = (
            result.node_edge_path_string(connector)
            if edges
            else result.node_path_string(connector)
        )
        print(rendered)
        print(f"cost: {result.cost()}")
    else:
        print(f"No path from {start} to {goal}")

    if not result.is_reachable:
        sys.exit(1)


def _inspect_graph(path: Path) -> None:
    """Print node and edge tables for a graph file."""
    logger.info(f"Inspecting graph: {path}")
    graph = _load(path, "inspect graph")

    print(f"Graph: {path}")
    print(f"  Nodes: {graph.number_of_nodes()}")
    print(f"  Edges: {graph.number_of_edges()}")

    node_rows = [
        [node, graph.out_degree(node), graph.in_degree(node)] for node in graph.nodes
    ]
    if node_rows:
        print("\n  Nodes:")
        print(_format_table(["Node", "Out", "In"], node_rows))

    edge_rows = [
        [edge.key, edge.src, edge.next, edge.cost, edge.name]
        for edge in graph.edges_list()
    ]
    if edge_rows:
        print("\n  Edges:")
        print(_format_table(["Id", "Source", "Target", "Cost", "Name"], edge_rows))


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``shortestpath`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="shortestpath",
        description="Find shortest paths in weighted directed graphs.",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{find,inspect}",
        help="Available commands",
    )

    find_parser = subparsers.add_parser("find", help="Find the shortest path")
    find_parser.add_argument("graph", type=Path, help="Path to graph YAML")
    find_parser.add_argument("start", help="Start node")
    find_parser.add_argument("goal", help="Goal node")
    find_parser.add_argument(
        "--connector",
        "-c",
        default=None,
        help=f"Separator between path elements (default: {SEARCH_CONFIG.connector!r})",
    )
    find_parser.add_argument(
        "--edges", "-e", action="store_true", help="Include edge labels in the path"
    )
    find_parser.add_argument(
        "--json", action="store_true", help="Print the result as JSON"
    )
    find_parser.add_argument(
        "--tie-break",
        choices=sorted(_TIE_BREAKS),
        default=None,
        help="Order in which equal-cost nodes are considered (default: key)",
    )

    inspect_parser = subparsers.add_parser("inspect", help="Inspect a graph file")
    inspect_parser.add_argument("graph", type=Path, help="Path to graph YAML")

    effective_args = sys.argv[1:] if argv is None else argv

    # No arguments: show help and exit cleanly
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    if args.command == "find":
        _find_path(
            path=args.graph,
            start=args.start,
            goal=args.goal,
            connector=args.connector,
            edges=args.edges,
            as_json=args.json,
            tie_break=args.tie_break,
        )
    elif args.command == "inspect":
        _inspect_graph(args.graph)


if __name__ == "__main__":
    main()
