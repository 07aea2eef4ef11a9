"""YAML and dictionary I/O for graphs.

Graph documents list edges in insertion order::

    edges:
      - {source: s, target: a, cost: 2, name: edge1}
      - {source: a, target: z, cost: 3}

``name`` is optional and defaults to an empty string.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Union

import yaml

from shortestpath.graph import Graph
from shortestpath.logging import get_logger

logger = get_logger(__name__)

_REQUIRED_KEYS = ("source", "target", "cost")


def graph_from_dict(data: Dict[str, Any]) -> Graph:
    """Build a graph from a parsed graph document.

    Args:
        data: Mapping with an ``edges`` list.

    Returns:
        Graph: The graph, edges added in document order.

    Raises:
        ValueError: If the document does not have the expected shape.
    """
    if not isinstance(data, dict):
        raise ValueError("The graph document must be a mapping at top-level.")

    edges = data.get("edges", [])
    if edges is None:
        edges = []
    if not isinstance(edges, list):
        raise ValueError("'edges' must be a list")

    graph = Graph()
    for idx, entry in enumerate(edges):
        if not isinstance(entry, dict):
            raise ValueError(
                f"Edge #{idx} must be a mapping with 'source' and 'target'"
            )
        missing = [key for key in _REQUIRED_KEYS if key not in entry]
        if missing:
            raise ValueError(
                f"Edge #{idx} is missing required keys: {', '.join(missing)}"
            )
        cost = entry["cost"]
        # bool is an int subclass; reject it explicitly
        if isinstance(cost, bool) or not isinstance(cost, int):
            raise ValueError(f"Edge #{idx} cost must be an integer, got {cost!r}")
        name = entry.get("name")
        graph.add(
            str(entry["source"]),
            str(entry["target"]),
            cost,
            "" if name is None else str(name),
        )

    logger.debug(
        f"Loaded graph with {graph.number_of_nodes()} nodes and "
        f"{graph.number_of_edges()} edges"
    )
    return graph


def load_graph_yaml(yaml_str: str) -> Graph:
    """Parse a YAML graph document.

    An empty document yields an empty graph.

    Raises:
        ValueError: If the document does not have the expected shape.
    """
    data = yaml.safe_load(yaml_str)
    if data is None:
        data = {}
    return graph_from_dict(data)


def load_graph_file(path: Union[str, Path]) -> Graph:
    """Read and parse a YAML graph file.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ValueError: If the document does not have the expected shape.
    """
    text = Path(path).read_text(encoding="utf-8")
    return load_graph_yaml(text)


def graph_to_dict(graph: Graph) -> Dict[str, List[Dict[str, Any]]]:
    """Convert a graph to a graph document, edges in insertion order."""
    return {
        "edges": [
            {
                "source": edge.src,
                "target": edge.next,
                "cost": edge.cost,
                "name": edge.name,
            }
            for edge in graph.edges_list()
        ]
    }


def dump_graph_yaml(graph: Graph) -> str:
    """Serialize a graph to a YAML graph document."""
    return yaml.safe_dump(graph_to_dict(graph), sort_keys=False)
