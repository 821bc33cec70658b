from .graph import Digraph, EdgeWeightedGraph, UnionFind

__all__ = ["Digraph", "EdgeWeightedGraph", "UnionFind"]
