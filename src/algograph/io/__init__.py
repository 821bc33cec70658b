from .graph_reader import (
    parse_digraph,
    parse_edge_weighted_graph,
    read_digraph,
    read_edge_weighted_graph,
)

__all__ = [
    "parse_digraph",
    "parse_edge_weighted_graph",
    "read_digraph",
    "read_edge_weighted_graph",
]
