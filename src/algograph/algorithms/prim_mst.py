from __future__ import annotations

import logging
import math
from typing import List, Optional

from algograph.algorithms.index_pq import IndexMinPQ
from algograph.exceptions import InvalidVertexError
from algograph.models import Edge
from algograph.topology.graph import EdgeWeightedGraph

logger = logging.getLogger(__name__)


class PrimMST:
    """Minimum spanning forest by the eager version of Prim's algorithm.

    One Prim pass is started from every vertex not yet on the forest, so a
    disconnected graph yields one tree per connected component.

      edge_to[v] -> cheapest known edge joining non-tree vertex v to the tree
      dist_to[v] -> weight of edge_to[v] (0.0 for a root, inf before discovery)

    Negative and duplicate weights are fine; only weight comparisons matter.
    Runs in O(E log V) time and O(V) extra space.
    """

    def __init__(self, graph: EdgeWeightedGraph):
        V = graph.V
        self._edge_to: List[Optional[Edge]] = [None] * V
        self._dist_to: List[float] = [math.inf] * V
        self._marked: List[bool] = [False] * V
        self._pq = IndexMinPQ(V)

        trees = 0
        for v in range(V):
            if not self._marked[v]:
                self._prim(graph, v)
                trees += 1
        logger.debug("prim: %d vertices, %d edges, %d tree(s), weight %.5f", V, graph.E, trees, self.weight())

    def _prim(self, graph: EdgeWeightedGraph, s: int) -> None:
        self._dist_to[s] = 0.0
        self._pq.insert(s, 0.0)
        while not self._pq.is_empty():
            v = self._pq.del_min()
            self._scan(graph, v)

    def _scan(self, graph: EdgeWeightedGraph, v: int) -> None:
        # v joins the tree; relax every edge leading off it
        self._marked[v] = True
        for e in graph.adj(v):
            w = e.other(v)
            if self._marked[w]:
                continue
            if e.weight < self._dist_to[w]:
                self._dist_to[w] = e.weight
                self._edge_to[w] = e
                if self._pq.contains(w):
                    self._pq.decrease_key(w, e.weight)
                else:
                    self._pq.insert(w, e.weight)

    def _validate_vertex(self, v: int) -> None:
        if not 0 <= v < len(self._edge_to):
            raise InvalidVertexError(v, len(self._edge_to))

    def edges(self) -> List[Edge]:
        """Forest edges, in order of the vertex they were attached through."""
        return [e for e in self._edge_to if e is not None]

    def weight(self) -> float:
        return float(sum(e.weight for e in self.edges()))

    def edge_to(self, v: int) -> Optional[Edge]:
        self._validate_vertex(v)
        return self._edge_to[v]

    def dist_to(self, v: int) -> float:
        self._validate_vertex(v)
        return self._dist_to[v]
