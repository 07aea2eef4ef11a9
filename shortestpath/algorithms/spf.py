"""Shortest-path-first (SPF) search with linear-scan node selection.

Label-setting Dijkstra: each round scans every reached, unsettled node,
settles the cheapest one and relaxes its outgoing edges. No priority queue
is used, so a query costs O(V^2); this is acceptable for the small graphs
the package targets.

Notes:
    All traversal state lives in a fresh ``NodeLabel`` mapping per query.
    The graph is never mutated, so repeated queries on one graph are
    independent.

    Equal-cost candidates are resolved by scan order (see ``TieBreak``):
    the first candidate scanned wins. Edges of a node are relaxed in
    insertion order and only a strictly cheaper cost replaces a label,
    so the first of several equal-cost parallel edges is the one recorded.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple

from shortestpath.algorithms.base import Cost, NodeID, TieBreak
from shortestpath.algorithms.paths import resolve_ways
from shortestpath.config import SEARCH_CONFIG
from shortestpath.graph import Edge, Graph
from shortestpath.logging import get_logger
from shortestpath.path import ResultPath

logger = get_logger(__name__)


@dataclass
class NodeLabel:
    """Per-query bookkeeping for one node.

    Attributes:
        cost: Best known cost from the start; None while unreached.
        done: True once ``cost`` is final.
        prev: Predecessor on the best known path.
        passage: Edge from ``prev`` used by the best known path.
    """

    cost: Optional[Cost] = None
    done: bool = False
    prev: Optional[NodeID] = None
    passage: Optional[Edge] = None

    def relax(self, new_cost: Cost, prev: NodeID, passage: Edge) -> bool:
        """Record a path if it is strictly cheaper than the current one.

        Returns:
            True if the label changed.
        """
        if self.cost is not None and new_cost >= self.cost:
            return False
        self.cost = new_cost
        self.prev = prev
        self.passage = passage
        return True


def _scan_order(graph: Graph, tie_break: TieBreak) -> List[NodeID]:
    if tie_break == TieBreak.INSERTION_ORDER:
        return list(graph.nodes)
    # String form keeps mixed key types comparable
    return sorted(graph.nodes, key=str)


def _select_settled(
    order: List[NodeID], labels: Dict[NodeID, NodeLabel]
) -> Optional[NodeID]:
    """Return the cheapest reached, unsettled node; first in ``order`` on ties."""
    best: Optional[NodeID] = None
    best_cost: Optional[Cost] = None
    for node in order:
        label = labels[node]
        if label.done or label.cost is None:
            continue
        if best_cost is None or label.cost < best_cost:
            best = node
            best_cost = label.cost
    return best


def _settle(
    graph: Graph,
    labels: Dict[NodeID, NodeLabel],
    order: List[NodeID],
) -> Iterator[Tuple[NodeID, NodeLabel]]:
    while True:
        node = _select_settled(order, labels)
        if node is None:
            return

        label = labels[node]
        assert label.cost is not None
        for edge in graph.node_edges(node):
            # A self-loop cannot make the node being settled any cheaper
            if edge.next == node:
                continue
            target = labels[edge.next]
            if target.done:
                continue
            if target.relax(label.cost + edge.cost, node, edge):
                logger.debug(
                    f"Relaxed {edge.next}: cost={target.cost} via {node} ({edge.name!r})"
                )

        label.done = True
        logger.debug(f"Settled {node} at cost {label.cost}")
        yield node, label


def _init_labels(start: NodeID, order: List[NodeID]) -> Dict[NodeID, NodeLabel]:
    labels = {node: NodeLabel() for node in order}
    labels[start].cost = 0
    return labels


def iter_settled(
    graph: Graph,
    start: NodeID,
    tie_break: Optional[TieBreak] = None,
) -> Iterator[Tuple[NodeID, NodeLabel]]:
    """Yield ``(node, label)`` for each node as it is settled.

    Nodes come out in non-decreasing cost order. Stopping the iteration
    early stops the search. Nothing is yielded for an unknown ``start``.

    Args:
        graph: Graph to search.
        start: Start node.
        tie_break: Scan order; ``SEARCH_CONFIG.tie_break`` when omitted.
    """
    if start not in graph:
        return
    order = _scan_order(graph, tie_break or SEARCH_CONFIG.tie_break)
    yield from _settle(graph, _init_labels(start, order), order)


def spf(
    graph: Graph,
    start: NodeID,
    goal: Optional[NodeID] = None,
    tie_break: Optional[TieBreak] = None,
) -> Dict[NodeID, NodeLabel]:
    """Run the search from ``start`` and return every node's label.

    Args:
        graph: Graph to search.
        start: Start node.
        goal: If given, stop as soon as this node is settled. Labels of
            nodes not yet settled at that point are provisional.
        tie_break: Scan order; ``SEARCH_CONFIG.tie_break`` when omitted.

    Returns:
        Labels keyed by node. Empty if ``start`` is not in the graph.
    """
    if start not in graph:
        return {}

    order = _scan_order(graph, tie_break or SEARCH_CONFIG.tie_break)
    labels = _init_labels(start, order)
    for node, _ in _settle(graph, labels, order):
        if goal is not None and node == goal:
            break
    return labels


def shortest_path(
    graph: Graph,
    start: NodeID,
    goal: NodeID,
    tie_break: Optional[TieBreak] = None,
) -> ResultPath:
    """Find the cheapest path from ``start`` to ``goal``.

    Edge weights must be non-negative; this is not checked.

    Args:
        graph: Graph to search.
        start: Start node.
        goal: Destination node.
        tie_break: Scan order for equal-cost candidates;
            ``SEARCH_CONFIG.tie_break`` when omitted.

    Returns:
        ResultPath: The path and its cost. Empty with cost -1 when ``start``
        is unknown or ``goal`` cannot be reached. Cost 0 and a single node
        when ``start == goal``.
    """
    if start not in graph:
        logger.debug(f"Start node '{start}' is not in the graph")
        return ResultPath.unreachable()

    labels = spf(graph, start, goal, tie_break)
    goal_label = labels.get(goal)
    if goal_label is None or goal_label.cost is None:
        logger.debug(f"No path from '{start}' to '{goal}'")
        return ResultPath.unreachable()

    return ResultPath(resolve_ways(labels, start, goal), goal_label.cost)
