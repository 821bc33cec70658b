from __future__ import annotations

from typing import Iterable, List, Tuple

from algograph.exceptions import InvalidVertexError
from algograph.models import Edge


def _check_vertex_count(vertex_count: int) -> int:
    if vertex_count < 0:
        raise ValueError(f"number of vertices must be non-negative, got {vertex_count}")
    return int(vertex_count)


class UnionFind:
    """Disjoint Set Union (Union-Find) over vertex ids 0..n-1.

    Operations are nearly O(1) amortized with path compression + union by rank.
    """
    def __init__(self, n: int):
        n = _check_vertex_count(n)
        self.parent: List[int] = list(range(n))
        self.rank: List[int] = [0] * n
        self.count = n

    def _validate(self, x: int) -> None:
        if not 0 <= x < len(self.parent):
            raise InvalidVertexError(x, len(self.parent))

    def find(self, x: int) -> int:
        self._validate(x)
        root = x
        while self.parent[root] != root:
            root = self.parent[root]
        # compress
        while self.parent[x] != x:
            nxt = self.parent[x]
            self.parent[x] = root
            x = nxt
        return root

    def connected(self, a: int, b: int) -> bool:
        return self.find(a) == self.find(b)

    def union(self, a: int, b: int) -> None:
        ra, rb = self.find(a), self.find(b)
        if ra == rb:
            return
        if self.rank[ra] < self.rank[rb]:
            ra, rb = rb, ra
        self.parent[rb] = ra
        if self.rank[ra] == self.rank[rb]:
            self.rank[ra] += 1
        self.count -= 1


class EdgeWeightedGraph:
    """Adjacency-list undirected graph with weighted edges.

    Vertices: dense ids 0..V-1
    Edges: stored once, referenced from both endpoints' adjacency lists
    """

    def __init__(self, vertex_count: int) -> None:
        self._V = _check_vertex_count(vertex_count)
        self._E = 0
        self._adj: List[List[Edge]] = [[] for _ in range(self._V)]

    @property
    def V(self) -> int:
        return self._V

    @property
    def E(self) -> int:
        return self._E

    def _validate_vertex(self, v: int) -> None:
        if not 0 <= v < self._V:
            raise InvalidVertexError(v, self._V)

    def add_edge(self, edge: Edge) -> None:
        v = edge.either()
        w = edge.other(v)
        self._validate_vertex(v)
        self._validate_vertex(w)
        self._adj[v].append(edge)
        self._adj[w].append(edge)
        self._E += 1

    @classmethod
    def from_edges(cls, vertex_count: int, edges: Iterable[Edge]) -> "EdgeWeightedGraph":
        g = cls(vertex_count)
        for e in edges:
            g.add_edge(e)
        return g

    def adj(self, v: int) -> List[Edge]:
        """Edges incident to v, in insertion order."""
        self._validate_vertex(v)
        return list(self._adj[v])

    def degree(self, v: int) -> int:
        self._validate_vertex(v)
        return len(self._adj[v])

    def edges(self) -> List[Edge]:
        """Every edge exactly once (a self-loop appears twice in adj but once here)."""
        result: List[Edge] = []
        for v in range(self._V):
            self_loops = 0
            for e in self._adj[v]:
                w = e.other(v)
                if w > v:
                    result.append(e)
                elif w == v:
                    # self-loop sits in adj[v] twice; keep every other copy
                    if self_loops % 2 == 0:
                        result.append(e)
                    self_loops += 1
        return result

    def __str__(self) -> str:
        lines = [f"{self._V} vertices, {self._E} edges"]
        for v in range(self._V):
            lines.append(f"{v}: " + "  ".join(str(e) for e in self._adj[v]))
        return "\n".join(lines)


class Digraph:
    """Adjacency-list directed graph without weights."""

    def __init__(self, vertex_count: int) -> None:
        self._V = _check_vertex_count(vertex_count)
        self._E = 0
        self._adj: List[List[int]] = [[] for _ in range(self._V)]
        self._indegree: List[int] = [0] * self._V

    @property
    def V(self) -> int:
        return self._V

    @property
    def E(self) -> int:
        return self._E

    def _validate_vertex(self, v: int) -> None:
        if not 0 <= v < self._V:
            raise InvalidVertexError(v, self._V)

    def add_edge(self, v: int, w: int) -> None:
        self._validate_vertex(v)
        self._validate_vertex(w)
        self._adj[v].append(w)
        self._indegree[w] += 1
        self._E += 1

    @classmethod
    def from_edges(cls, vertex_count: int, edges: Iterable[Tuple[int, int]]) -> "Digraph":
        g = cls(vertex_count)
        for v, w in edges:
            g.add_edge(v, w)
        return g

    def adj(self, v: int) -> List[int]:
        """Heads of edges leaving v, in insertion order."""
        self._validate_vertex(v)
        return list(self._adj[v])

    def outdegree(self, v: int) -> int:
        self._validate_vertex(v)
        return len(self._adj[v])

    def indegree(self, v: int) -> int:
        self._validate_vertex(v)
        return self._indegree[v]

    def edges(self) -> List[Tuple[int, int]]:
        return [(v, w) for v in range(self._V) for w in self._adj[v]]

    def reverse(self) -> "Digraph":
        """Copy of this digraph with every edge flipped."""
        rev = Digraph(self._V)
        for v in range(self._V):
            for w in self._adj[v]:
                rev.add_edge(w, v)
        return rev

    def __str__(self) -> str:
        lines = [f"{self._V} vertices, {self._E} edges"]
        for v in range(self._V):
            lines.append(f"{v}: " + " ".join(str(w) for w in self._adj[v]))
        return "\n".join(lines)
