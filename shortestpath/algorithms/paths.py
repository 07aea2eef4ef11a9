"""Turn predecessor labels into a start-to-goal way sequence."""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, List, Set, Tuple

from shortestpath.algorithms.base import NodeID
from shortestpath.path import Way

if TYPE_CHECKING:
    from shortestpath.algorithms.spf import NodeLabel


def resolve_ways(
    labels: Dict[NodeID, NodeLabel],
    start: NodeID,
    goal: NodeID,
) -> Tuple[Way, ...]:
    """Walk predecessor links from ``goal`` back to ``start``.

    Each step records the node and, when present, the edge that led into it.
    The walk is built goal-first and reversed before returning.

    Args:
        labels: Labels from a finished search. ``goal`` must have been reached.
        start: Start node of the search; included in the result.
        goal: Node to walk back from.

    Returns:
        Ways in start-to-goal order: node, edge, node, ..., node.

    Raises:
        ValueError: If the predecessor chain is broken or loops before
            reaching ``start``.
    """
    ways: List[Way] = []
    visited: Set[NodeID] = set()
    node = goal
    while True:
        if node in visited:
            raise ValueError(f"Predecessor chain from '{goal}' loops at '{node}'.")
        visited.add(node)
        label = labels.get(node)
        if label is None or label.cost is None:
            raise ValueError(f"Node '{node}' was not reached from '{start}'.")
        ways.append(Way.node(node))
        if node == start:
            break
        if label.passage is None or label.prev is None:
            raise ValueError(f"Predecessor chain from '{goal}' breaks at '{node}'.")
        ways.append(Way.edge(label.passage.name, label.passage.cost))
        node = label.prev

    ways.reverse()
    return tuple(ways)
