"""Result values returned by shortest-path queries.

A `ResultPath` is an immutable sequence of `Way` elements that alternate
node, edge, node, ..., node, together with the total cost of the path.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import Any, Dict, Iterator, List, Optional, Tuple

from shortestpath.algorithms.base import UNREACHED, Cost, NodeID, WayKind
from shortestpath.config import SEARCH_CONFIG


@dataclass(frozen=True)
class Way:
    """
    One element of a result path: a node visit or an edge traversal.

    Attributes:
        kind: Whether this is a node or an edge.
        name: Node key for a node, edge label for an edge.
        cost: Edge weight for an edge; None for a node.
    """

    kind: WayKind
    name: Any
    cost: Optional[Cost] = None

    @classmethod
    def node(cls, name: NodeID) -> Way:
        """Return the element for a visit to node ``name``."""
        return cls(WayKind.NODE, name)

    @classmethod
    def edge(cls, name: str, cost: Cost) -> Way:
        """Return the element for traversing edge ``name`` of weight ``cost``."""
        return cls(WayKind.EDGE, name, cost)

    @property
    def is_node(self) -> bool:
        return self.kind == WayKind.NODE


@dataclass(frozen=True)
class ResultPath:
    """
    Outcome of a single shortest-path query.

    Attributes:
        ways (Tuple[Way, ...]):
            Node and edge elements in traversal order, alternating
            node, edge, node, ..., node. Empty when no path exists.
        total_cost (Cost):
            Sum of the edge weights along the path, or -1 when the start is
            unknown or the goal cannot be reached.
    """

    ways: Tuple[Way, ...] = ()
    total_cost: Cost = UNREACHED

    @classmethod
    def unreachable(cls) -> ResultPath:
        """Return the empty result used for unknown starts and unreachable goals."""
        return cls((), UNREACHED)

    def cost(self) -> Cost:
        """Return the total cost, -1 if there is no path."""
        return self.total_cost

    @property
    def is_reachable(self) -> bool:
        return bool(self.ways)

    def get_node_path(self) -> Tuple[Way, ...]:
        """Return the raw way sequence."""
        return self.ways

    def __iter__(self) -> Iterator[Way]:
        return iter(self.ways)

    def __len__(self) -> int:
        return len(self.ways)

    def __repr__(self) -> str:
        return f"ResultPath({self.node_edge_path_string()!r}, cost={self.total_cost})"

    @cached_property
    def nodes_seq(self) -> Tuple[NodeID, ...]:
        """Node keys from start to goal."""
        return tuple(way.name for way in self.ways if way.kind == WayKind.NODE)

    @cached_property
    def edges_seq(self) -> Tuple[Way, ...]:
        """Edge elements from start to goal."""
        return tuple(way for way in self.ways if way.kind == WayKind.EDGE)

    def node_path_string(self, connector: Optional[str] = None) -> str:
        """
        Render the node keys joined by ``connector``.

        Args:
            connector: Separator; ``SEARCH_CONFIG.connector`` when omitted.

        Returns:
            For example ``"s->a->b"``. Empty string when there is no path.
        """
        if connector is None:
            connector = SEARCH_CONFIG.connector
        return connector.join(str(name) for name in self.nodes_seq)

    def node_edge_path_string(self, connector: Optional[str] = None) -> str:
        """
        Render nodes and edge labels alternately, joined by ``connector``.

        Edge labels are wrapped per ``SEARCH_CONFIG.edge_label_template``,
        giving for example ``"s->((edge1))->a"``.

        Args:
            connector: Separator; ``SEARCH_CONFIG.connector`` when omitted.
        """
        if connector is None:
            connector = SEARCH_CONFIG.connector
        parts: List[str] = []
        for way in self.ways:
            if way.kind == WayKind.NODE:
                parts.append(str(way.name))
            else:
                parts.append(SEARCH_CONFIG.format_edge_label(way.name))
        return connector.join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "cost": self.total_cost,
            "nodes": list(self.nodes_seq),
            "edges": [{"name": way.name, "cost": way.cost} for way in self.edges_seq],
        }
