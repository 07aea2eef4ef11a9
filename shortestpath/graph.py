"""Weighted directed multigraph used for shortest-path queries.

`Graph` extends `networkx.MultiDiGraph`. Nodes are created on first
reference, parallel edges between the same pair are kept apart, and every
edge gets an integer id that increases in insertion order, so a node's
outgoing edges can always be listed in the order they were added.

Graphs hold adjacency only. Shortest-path queries keep their bookkeeping in
per-query scratch state and never mutate the graph.
"""

from __future__ import annotations

from dataclasses import dataclass
from pickle import dumps, loads
from typing import TYPE_CHECKING, Any, Iterable, List, Optional, Tuple

import networkx as nx

from shortestpath.algorithms.base import Cost, EdgeID, NodeID, TieBreak
from shortestpath.logging import get_logger

if TYPE_CHECKING:
    from shortestpath.path import ResultPath

logger = get_logger(__name__)

#: ``(src, dst, cost, name)`` as accepted by :meth:`Graph.from_edges`.
EdgeSpec = Tuple[NodeID, NodeID, Cost, str]


@dataclass(frozen=True)
class Edge:
    """A directed edge as seen from its source node.

    Attributes:
        src: Source node key.
        next: Destination node key.
        name: Edge label; only used for rendering.
        cost: Edge weight.
        key: Graph-assigned edge id.
    """

    src: NodeID
    next: NodeID
    name: str
    cost: Cost
    key: EdgeID


class Graph(nx.MultiDiGraph):
    """Directed multigraph with labeled, weighted edges.

    Edge weights must be non-negative. This is a precondition of the
    shortest-path search and is not checked: negative weights are stored
    as given and produce unspecified results.
    """

    def __init__(self, *args, **kwargs) -> None:
        # Only advances; removed edges do not give their id back. Set before
        # the base constructor, which may add edges from incoming data.
        self._next_edge_id: int = 0
        super().__init__(*args, **kwargs)

    @classmethod
    def from_edges(cls, edges: Iterable[EdgeSpec]) -> Graph:
        """Build a graph from ``(src, dst, cost, name)`` tuples.

        Args:
            edges: Edge tuples, added in iteration order.

        Returns:
            Graph: The new graph.
        """
        graph = cls()
        for src, dst, cost, name in edges:
            graph.add(src, dst, cost, name)
        return graph

    def new_edge_key(self, u: NodeID, v: NodeID, key: Optional[int] = None) -> int:  # type: ignore[override]
        """Return the next integer edge id.

        Signature matches NetworkX's ``new_edge_key(self, u, v, key=None)``;
        ``u``, ``v`` and ``key`` are ignored.
        """
        next_edge_id = self._next_edge_id
        self._next_edge_id += 1
        return next_edge_id

    def copy(self, as_view: bool = False, pickle: bool = True) -> Graph:
        """Create a copy of this graph.

        The default pickle round-trip keeps edge ids and the id counter.
        With ``pickle=False`` the NetworkX copy is used, which supports views.
        """
        if not pickle:
            return super().copy(as_view=as_view)  # type: ignore[return-value]
        return loads(dumps(self))

    def add(
        self, src: NodeID, dst: NodeID, cost: Cost, edge_name: str = ""
    ) -> EdgeID:
        """Add a directed edge ``src -> dst``.

        Missing nodes are created, ``dst`` before ``src``. Adding the same
        pair again creates a parallel edge rather than updating the first.

        Args:
            src: Source node key.
            dst: Destination node key.
            cost: Edge weight. Must be non-negative; not validated.
            edge_name: Edge label.

        Returns:
            EdgeID: Id of the new edge.
        """
        if dst not in self:
            self.add_node(dst)
        if src not in self:
            self.add_node(src)
        key = self.new_edge_key(src, dst)
        super().add_edge(src, dst, key=key, cost=cost, name=edge_name)
        logger.debug(
            f"Added edge {key}: {src} -> {dst} (cost={cost}, name={edge_name!r})"
        )
        return key

    def add_edge(  # pyright: ignore[reportIncompatibleMethodOverride]
        self,
        u_for_edge: NodeID,
        v_for_edge: NodeID,
        key: Optional[EdgeID] = None,
        **attr: Any,
    ) -> EdgeID:
        """Add an edge through the NetworkX API.

        Used by NetworkX helpers such as ``add_edges_from``. Edge ids must be
        integers so that insertion order can be recovered from them.

        Raises:
            ValueError: If ``key`` is not an integer or is already in use.
        """
        if key is None:
            key = self.new_edge_key(u_for_edge, v_for_edge)
        else:
            if not isinstance(key, int):
                raise ValueError(f"Edge id must be an integer, got {key!r}.")
            if self.has_edge(u_for_edge, v_for_edge, key):
                raise ValueError(f"Edge with id '{key}' already exists.")
            if key >= self._next_edge_id:
                self._next_edge_id = key + 1
        attr.setdefault("cost", 0)
        attr.setdefault("name", "")
        super().add_edge(u_for_edge, v_for_edge, key=key, **attr)
        return key

    def node_edges(self, node: NodeID) -> List[Edge]:
        """List the outgoing edges of ``node`` in insertion order.

        Returns an empty list for an unknown node.
        """
        if node not in self._adj:
            return []
        edges = [
            Edge(node, nbr, attr["name"], attr["cost"], key)
            for nbr, keyed in self._adj[node].items()
            for key, attr in keyed.items()
        ]
        edges.sort(key=lambda edge: edge.key)
        return edges

    def edges_list(self) -> List[Edge]:
        """List every edge of the graph in insertion order."""
        edges = [
            Edge(src, dst, attr["name"], attr["cost"], key)
            for src, dst, key, attr in self.edges(keys=True, data=True)
        ]
        edges.sort(key=lambda edge: edge.key)
        return edges

    def shortest_path(
        self,
        start: NodeID,
        goal: NodeID,
        tie_break: Optional[TieBreak] = None,
    ) -> ResultPath:
        """Find the cheapest path from ``start`` to ``goal``.

        See :func:`shortestpath.algorithms.spf.shortest_path`.
        """
        from shortestpath.algorithms.spf import shortest_path

        return shortest_path(self, start, goal, tie_break=tie_break)
