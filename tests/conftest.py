"""Shared graph fixtures."""

from __future__ import annotations

import pytest

from shortestpath.graph import Graph


@pytest.fixture
def example_graph():
    # s->a 2, s->b 5, a->b 2, a->c 5, b->c 4,
    # b->d 2, c->z 7, d->c 5, d->z 2
    # Cheapest s->z: s-a-b-d-z, cost 8.
    g = Graph()
    g.add("s", "a", 2, "edge1")
    g.add("s", "b", 5, "edge2")
    g.add("a", "b", 2, "edge3")
    g.add("a", "c", 5, "edge4")
    g.add("b", "c", 4, "edge5")
    g.add("b", "d", 2, "edge6")
    g.add("c", "z", 7, "edge7")
    g.add("d", "c", 5, "edge8")
    g.add("d", "z", 2, "edge9")
    return g


@pytest.fixture
def tie_graph():
    # Two equal-cost routes s -> t. Key order prefers x, insertion order
    # prefers y (y is created before x).
    #
    #     [1]  y  [1]
    #   ┌────►   ─────┐
    #   s              t
    #   └────►   ─────┘
    #     [1]  x  [1]
    g = Graph()
    g.add("s", "y", 1, "s-y")
    g.add("s", "x", 1, "s-x")
    g.add("y", "t", 1, "y-t")
    g.add("x", "t", 1, "x-t")
    return g


@pytest.fixture
def parallel_graph():
    # Three parallel a -> b edges; two share the minimum cost.
    g = Graph()
    g.add("a", "b", 3, "slow")
    g.add("a", "b", 1, "fast")
    g.add("a", "b", 1, "fast-too")
    g.add("b", "c", 1, "bc")
    return g


@pytest.fixture
def split_graph():
    # Two components: a -> b and c -> d.
    g = Graph()
    g.add("a", "b", 1, "ab")
    g.add("c", "d", 1, "cd")
    return g
