from __future__ import annotations

import logging
from typing import List

from algograph.algorithms.depth_first_order import DepthFirstOrder
from algograph.exceptions import InvalidVertexError
from algograph.topology.graph import Digraph

logger = logging.getLogger(__name__)


class KosarajuSharirSCC:
    """Strongly connected components by the Kosaraju-Sharir algorithm.

    1. Reverse postorder of a depth-first search on the reversed digraph.
    2. Depth-first search on the digraph itself, taking unmarked start
       vertices in that order. Each start vertex opens a new component and
       everything it reaches gets the same id.

    Ids are 0..count()-1 in discovery order. Runs in O(V + E).
    """

    def __init__(self, digraph: Digraph):
        order = DepthFirstOrder(digraph.reverse())

        V = digraph.V
        self._marked: List[bool] = [False] * V
        self._id: List[int] = [-1] * V
        self._count = 0

        adj = [digraph.adj(v) for v in range(V)]
        for v in order.reverse_post():
            if not self._marked[v]:
                self._mark_component(adj, v)
                self._count += 1
        logger.debug("kosaraju: %d vertices, %d edges, %d component(s)", V, digraph.E, self._count)

    def _mark_component(self, adj: List[List[int]], s: int) -> None:
        # label everything reachable from s with the current id
        self._marked[s] = True
        self._id[s] = self._count
        stack = [s]
        while stack:
            v = stack.pop()
            for w in adj[v]:
                if not self._marked[w]:
                    self._marked[w] = True
                    self._id[w] = self._count
                    stack.append(w)

    def _validate_vertex(self, v: int) -> None:
        if not 0 <= v < len(self._id):
            raise InvalidVertexError(v, len(self._id))

    def count(self) -> int:
        return self._count

    def id(self, v: int) -> int:
        self._validate_vertex(v)
        return self._id[v]

    def ids(self) -> List[int]:
        return list(self._id)

    def are_strongly_connected(self, v: int, w: int) -> bool:
        self._validate_vertex(v)
        self._validate_vertex(w)
        return self._id[v] == self._id[w]

    def components(self) -> List[List[int]]:
        """Member vertices of each component, indexed by component id."""
        groups: List[List[int]] = [[] for _ in range(self._count)]
        for v, cid in enumerate(self._id):
            groups[cid].append(v)
        return groups
