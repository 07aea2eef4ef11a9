from pathlib import Path

import pytest

from shortestpath.io import (
    dump_graph_yaml,
    graph_from_dict,
    graph_to_dict,
    load_graph_file,
    load_graph_yaml,
)

EXAMPLE_YAML = """
edges:
  - {source: s, target: a, cost: 2, name: edge1}
  - {source: s, target: b, cost: 5, name: edge2}
  - {source: a, target: b, cost: 2, name: edge3}
  - {source: a, target: c, cost: 5, name: edge4}
  - {source: b, target: c, cost: 4, name: edge5}
  - {source: b, target: d, cost: 2, name: edge6}
  - {source: c, target: z, cost: 7, name: edge7}
  - {source: d, target: c, cost: 5, name: edge8}
  - {source: d, target: z, cost: 2, name: edge9}
"""


def test_load_graph_yaml_example():
    g = load_graph_yaml(EXAMPLE_YAML)
    assert g.number_of_nodes() == 6
    assert g.number_of_edges() == 9
    result = g.shortest_path("s", "z")
    assert result.cost() == 8
    assert result.node_path_string("->") == "s->a->b->d->z"


def test_name_is_optional():
    g = load_graph_yaml("edges:\n  - {source: a, target: b, cost: 1}\n")
    assert g.node_edges("a")[0].name == ""


def test_keys_are_stringified():
    g = load_graph_yaml("edges:\n  - {source: 1, target: 2, cost: 1, name: 3}\n")
    edge = g.node_edges("1")[0]
    assert (edge.src, edge.next, edge.name) == ("1", "2", "3")


def test_empty_documents():
    assert load_graph_yaml("").number_of_nodes() == 0
    assert load_graph_yaml("edges:\n").number_of_nodes() == 0
    assert load_graph_yaml("edges: []\n").number_of_nodes() == 0


def test_top_level_must_be_mapping():
    with pytest.raises(ValueError, match="mapping at top-level"):
        load_graph_yaml("- a\n- b\n")


def test_edges_must_be_list():
    with pytest.raises(ValueError, match="'edges' must be a list"):
        load_graph_yaml("edges:\n  a: b\n")


def test_edge_must_be_mapping():
    with pytest.raises(ValueError, match="Edge #0 must be a mapping"):
        load_graph_yaml("edges:\n  - a\n")


def test_missing_keys_reported():
    with pytest.raises(ValueError, match="missing required keys: target, cost"):
        graph_from_dict({"edges": [{"source": "a"}]})


@pytest.mark.parametrize("cost", ["1", 1.5, True, None])
def test_cost_must_be_integer(cost):
    with pytest.raises(ValueError, match="cost must be an integer"):
        graph_from_dict({"edges": [{"source": "a", "target": "b", "cost": cost}]})


def test_load_graph_file(tmp_path: Path):
    path = tmp_path / "graph.yaml"
    path.write_text(EXAMPLE_YAML)
    assert load_graph_file(path).number_of_edges() == 9
    assert load_graph_file(str(path)).number_of_edges() == 9


def test_load_graph_file_missing(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_graph_file(tmp_path / "missing.yaml")


def test_graph_to_dict(example_graph):
    data = graph_to_dict(example_graph)
    assert len(data["edges"]) == 9
    assert data["edges"][0] == {"source": "s", "target": "a", "cost": 2, "name": "edge1"}


def test_dump_then_load_preserves_edges(example_graph):
    reloaded = load_graph_yaml(dump_graph_yaml(example_graph))
    assert reloaded.edges_list() == example_graph.edges_list()
