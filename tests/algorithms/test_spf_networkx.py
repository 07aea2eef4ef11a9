"""Cross-check shortest_path against networkx on random graphs."""

import random

import networkx as nx
import pytest

from shortestpath.algorithms.spf import iter_settled, shortest_path
from shortestpath.graph import Graph


def random_graph(seed: int, num_nodes: int = 8, num_edges: int = 20) -> Graph:
    rng = random.Random(seed)
    g = Graph()
    for idx in range(num_edges):
        src = f"n{rng.randrange(num_nodes)}"
        dst = f"n{rng.randrange(num_nodes)}"
        g.add(src, dst, rng.randrange(10), f"e{idx}")
    return g


@pytest.mark.parametrize("seed", range(10))
def test_costs_match_networkx(seed):
    g = random_graph(seed)
    for start in g.nodes:
        for goal in g.nodes:
            result = shortest_path(g, start, goal)
            if nx.has_path(g, start, goal):
                expected = nx.dijkstra_path_length(g, start, goal, weight="cost")
                assert result.cost() == expected, (start, goal)
            else:
                assert result.cost() == -1, (start, goal)
                assert len(result) == 0


@pytest.mark.parametrize("seed", range(10))
def test_path_follows_real_edges(seed):
    g = random_graph(seed)
    for start in g.nodes:
        for goal in g.nodes:
            result = shortest_path(g, start, goal)
            if not result.is_reachable:
                continue
            nodes = result.nodes_seq
            edges = result.edges_seq
            assert nodes[0] == start
            assert nodes[-1] == goal
            assert len(edges) == len(nodes) - 1
            assert result.cost() == sum(way.cost for way in edges)
            for src, dst, way in zip(nodes, nodes[1:], edges):
                candidates = {
                    (edge.name, edge.cost)
                    for edge in g.node_edges(src)
                    if edge.next == dst
                }
                assert (way.name, way.cost) in candidates


@pytest.mark.parametrize("seed", range(5))
def test_settled_costs_non_decreasing(seed):
    g = random_graph(seed)
    for start in g.nodes:
        costs = [label.cost for _, label in iter_settled(g, start)]
        assert costs == sorted(costs)
