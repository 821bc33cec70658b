from __future__ import annotations

import logging
import math
from collections import deque
from typing import Iterable, List, Optional, Union

from algograph.exceptions import InvalidVertexError
from algograph.topology.graph import Digraph

logger = logging.getLogger(__name__)

INFINITY = math.inf


class BreadthFirstDirectedPaths:
    """Shortest (fewest edges) directed paths from one source or a set of sources.

    Every source is seeded at distance 0, so path_to(v) ends at whichever
    source is nearest to v. edge_to[w] is written only on the first discovery
    of w, which is also the shortest one.
    """

    def __init__(self, digraph: Digraph, sources: Union[int, Iterable[int]]):
        V = digraph.V
        if isinstance(sources, int):
            sources = [sources]
        sources = list(sources)
        if not sources:
            raise ValueError("at least one source vertex is required")
        for s in sources:
            if not 0 <= s < V:
                raise InvalidVertexError(s, V)

        self._marked: List[bool] = [False] * V
        self._dist_to: List[float] = [INFINITY] * V
        self._edge_to: List[Optional[int]] = [None] * V
        self._bfs(digraph, sources)
        logger.debug(
            "bfs: %d source(s), %d of %d vertices reachable",
            len(sources), sum(self._marked), V,
        )

    def _bfs(self, digraph: Digraph, sources: List[int]) -> None:
        queue = deque()
        for s in sources:
            if self._marked[s]:
                continue
            self._marked[s] = True
            self._dist_to[s] = 0
            queue.append(s)

        while queue:
            s = queue.popleft()
            for w in digraph.adj(s):
                if not self._marked[w]:
                    self._edge_to[w] = s
                    self._dist_to[w] = self._dist_to[s] + 1
                    self._marked[w] = True
                    queue.append(w)

    def _validate_vertex(self, v: int) -> None:
        if not 0 <= v < len(self._marked):
            raise InvalidVertexError(v, len(self._marked))

    def has_path_to(self, v: int) -> bool:
        self._validate_vertex(v)
        return self._marked[v]

    def dist_to(self, v: int) -> float:
        """Number of edges on a shortest path to v, or INFINITY."""
        self._validate_vertex(v)
        return self._dist_to[v]

    def edge_to(self, v: int) -> Optional[int]:
        """Predecessor of v on its shortest path (None for sources and unreachable vertices)."""
        self._validate_vertex(v)
        return self._edge_to[v]

    def path_to(self, v: int) -> Optional[List[int]]:
        """Vertices from the nearest source to v, or None when v is unreachable."""
        if not self.has_path_to(v):
            return None
        path = [v]
        x = v
        while self._dist_to[x] != 0:
            x = self._edge_to[x]
            path.append(x)
        path.reverse()
        return path
