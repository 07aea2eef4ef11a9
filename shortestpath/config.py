"""Configuration classes for shortestpath components."""

from dataclasses import dataclass

from shortestpath.algorithms.base import TieBreak


@dataclass
class SearchConfig:
    """Defaults for path search and result rendering."""

    # Joins elements in rendered paths when no connector is given
    connector: str = "->"

    # Scan order for equal-cost candidates during selection
    tie_break: TieBreak = TieBreak.KEY_ORDER

    # Wraps edge labels in node/edge path strings
    edge_label_template: str = "(({}))"

    def format_edge_label(self, name: str) -> str:
        """Render an edge label for a node/edge path string."""
        return self.edge_label_template.format(name)


# Global configuration instance
SEARCH_CONFIG = SearchConfig()
