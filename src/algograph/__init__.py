"""Classic graph algorithms: Prim's minimum spanning forest, Kosaraju-Sharir
strongly connected components and breadth-first directed paths."""

from algograph.algorithms import (
    INFINITY,
    BreadthFirstDirectedPaths,
    DepthFirstOrder,
    IndexMinPQ,
    KosarajuSharirSCC,
    PrimMST,
)
from algograph.models import Edge, ValidationIssue
from algograph.topology import Digraph, EdgeWeightedGraph, UnionFind

__version__ = "0.1.0"

__all__ = [
    "INFINITY",
    "BreadthFirstDirectedPaths",
    "DepthFirstOrder",
    "Digraph",
    "Edge",
    "EdgeWeightedGraph",
    "IndexMinPQ",
    "KosarajuSharirSCC",
    "PrimMST",
    "UnionFind",
    "ValidationIssue",
]
