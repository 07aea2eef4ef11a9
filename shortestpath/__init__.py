"""shortestpath: single-pair shortest paths over weighted directed graphs.

Primary API:
    Graph - Directed multigraph with labeled, weighted edges
    shortest_path() - Cheapest path between two nodes
    ResultPath - Immutable query result with cost and path rendering

Example:
    from shortestpath import Graph

    g = Graph()
    g.add("s", "a", 2, "edge1")
    g.add("a", "z", 3, "edge2")

    result = g.shortest_path("s", "z")
    result.cost()                         # 5
    result.node_path_string("->")         # "s->a->z"
    result.node_edge_path_string("->")    # "s->((edge1))->a->((edge2))->z"
"""

from __future__ import annotations

from shortestpath import cli, logging
from shortestpath._version import __version__
from shortestpath.algorithms.base import UNREACHED, TieBreak, WayKind
from shortestpath.algorithms.spf import NodeLabel, iter_settled, shortest_path, spf
from shortestpath.config import SEARCH_CONFIG, SearchConfig
from shortestpath.graph import Edge, Graph
from shortestpath.io import dump_graph_yaml, load_graph_file, load_graph_yaml
from shortestpath.path import ResultPath, Way

__all__ = [
    # Version
    "__version__",
    # Model
    "Graph",
    "Edge",
    "ResultPath",
    "Way",
    # Algorithms
    "shortest_path",
    "spf",
    "iter_settled",
    "NodeLabel",
    # Types
    "TieBreak",
    "WayKind",
    "UNREACHED",
    # Configuration
    "SearchConfig",
    "SEARCH_CONFIG",
    # I/O
    "load_graph_yaml",
    "load_graph_file",
    "dump_graph_yaml",
    # Utilities
    "cli",
    "logging",
]
