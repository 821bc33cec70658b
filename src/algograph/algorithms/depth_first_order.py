from __future__ import annotations

from typing import List

from algograph.exceptions import InvalidVertexError
from algograph.topology.graph import Digraph


class DepthFirstOrder:
    """Preorder, postorder and reverse postorder of a digraph's depth-first search.

    Roots are tried in ascending vertex order and neighbours in adjacency
    order. The search runs on an explicit stack of (vertex, next neighbour
    position) frames, so path length is not limited by the recursion limit.
    """

    def __init__(self, digraph: Digraph):
        V = digraph.V
        self._marked: List[bool] = [False] * V
        self._pre_rank: List[int] = [-1] * V
        self._post_rank: List[int] = [-1] * V
        self._preorder: List[int] = []
        self._postorder: List[int] = []

        adj = [digraph.adj(v) for v in range(V)]
        for v in range(V):
            if not self._marked[v]:
                self._dfs(adj, v)

    def _visit(self, v: int) -> None:
        self._marked[v] = True
        self._pre_rank[v] = len(self._preorder)
        self._preorder.append(v)

    def _dfs(self, adj: List[List[int]], root: int) -> None:
        self._visit(root)
        stack = [[root, 0]]
        while stack:
            frame = stack[-1]
            v, pos = frame
            neighbours = adj[v]
            if pos < len(neighbours):
                frame[1] = pos + 1
                w = neighbours[pos]
                if not self._marked[w]:
                    self._visit(w)
                    stack.append([w, 0])
            else:
                # every descendant of v is finished
                stack.pop()
                self._post_rank[v] = len(self._postorder)
                self._postorder.append(v)

    def _validate_vertex(self, v: int) -> None:
        if not 0 <= v < len(self._marked):
            raise InvalidVertexError(v, len(self._marked))

    def pre(self) -> List[int]:
        return list(self._preorder)

    def post(self) -> List[int]:
        return list(self._postorder)

    def reverse_post(self) -> List[int]:
        return self._postorder[::-1]

    def pre_order(self, v: int) -> int:
        self._validate_vertex(v)
        return self._pre_rank[v]

    def post_order(self, v: int) -> int:
        self._validate_vertex(v)
        return self._post_rank[v]
