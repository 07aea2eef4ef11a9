"""Test the configuration module functionality."""

from shortestpath.algorithms.base import TieBreak
from shortestpath.algorithms.spf import shortest_path
from shortestpath.config import SEARCH_CONFIG, SearchConfig


def test_search_config_defaults():
    """Test that the default configuration values are correct."""
    config = SearchConfig()

    assert config.connector == "->"
    assert config.tie_break == TieBreak.KEY_ORDER
    assert config.edge_label_template == "(({}))"


def test_format_edge_label():
    assert SearchConfig().format_edge_label("edge1") == "((edge1))"
    assert SearchConfig(edge_label_template="<{}>").format_edge_label("e") == "<e>"


def test_global_config_instance():
    """Test that the global configuration instance exists and has defaults."""
    assert isinstance(SEARCH_CONFIG, SearchConfig)
    assert SEARCH_CONFIG.connector == "->"


def test_global_tie_break_used_by_default(tie_graph, monkeypatch):
    """Changing the global tie-break changes queries that do not pass one."""
    assert shortest_path(tie_graph, "s", "t").node_path_string() == "s->x->t"
    monkeypatch.setattr(SEARCH_CONFIG, "tie_break", TieBreak.INSERTION_ORDER)
    assert shortest_path(tie_graph, "s", "t").node_path_string() == "s->y->t"
    # An explicit argument wins over the global
    assert (
        shortest_path(tie_graph, "s", "t", tie_break=TieBreak.KEY_ORDER)
        .node_path_string()
        == "s->x->t"
    )
