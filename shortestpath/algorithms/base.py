from __future__ import annotations

from enum import IntEnum
from typing import Hashable, Union

#: Node key. Graphs built through ``Graph.add`` use strings.
NodeID = Hashable

#: Edge id assigned by the graph; increases in insertion order.
EdgeID = int

#: Numeric cost of an edge or a path. Weights must be non-negative.
Cost = Union[int, float]

#: Cost reported for an unknown start or an unreachable goal.
UNREACHED = -1


class WayKind(IntEnum):
    """Kind of a single element of a result path."""

    NODE = 1
    EDGE = 2


class TieBreak(IntEnum):
    """
    Order in which candidate nodes are scanned when picking the next node to
    settle. Among candidates with equal cost the first one scanned wins.
    """

    #: Scan nodes sorted by key (lexicographic for string keys).
    KEY_ORDER = 1
    #: Scan nodes in the order they were first added to the graph.
    INSERTION_ORDER = 2
