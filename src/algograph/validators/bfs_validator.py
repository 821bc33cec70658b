from __future__ import annotations

import logging
from typing import Iterable, List, Union

from algograph.algorithms.bfs_paths import BreadthFirstDirectedPaths
from algograph.models import ValidationIssue
from algograph.topology.graph import Digraph

logger = logging.getLogger(__name__)


class BFSPathsValidator:
    """Shortest-path conditions for a breadth-first path tree.

      - every source has distance 0
      - for each edge v->w with v reachable: w is reachable and dist(w) <= dist(v) + 1
      - for each reachable non-source w: dist(w) == dist(edge_to(w)) + 1
    """

    def validate(
        self,
        digraph: Digraph,
        bfs: BreadthFirstDirectedPaths,
        sources: Union[int, Iterable[int]],
    ) -> List[ValidationIssue]:
        if isinstance(sources, int):
            sources = [sources]
        source_set = set(sources)
        issues: List[ValidationIssue] = []

        for s in sorted(source_set):
            if bfs.dist_to(s) != 0:
                issues.append(
                    ValidationIssue(
                        severity="error",
                        issue_type="source_distance",
                        message=f"Source {s} has distance {bfs.dist_to(s)}, expected 0.",
                        vertex=s,
                    )
                )

        for v, w in digraph.edges():
            if not bfs.has_path_to(v):
                continue
            if not bfs.has_path_to(w):
                issues.append(
                    ValidationIssue(
                        severity="error",
                        issue_type="unreached_neighbour",
                        message=f"Edge {v}->{w}: {v} is reachable but {w} is not.",
                        vertex=w,
                        edge=f"{v}->{w}",
                    )
                )
            elif bfs.dist_to(w) > bfs.dist_to(v) + 1:
                issues.append(
                    ValidationIssue(
                        severity="error",
                        issue_type="edge_not_relaxed",
                        message=f"Edge {v}->{w}: dist({w})={bfs.dist_to(w)} exceeds dist({v})+1={bfs.dist_to(v) + 1}.",
                        vertex=w,
                        edge=f"{v}->{w}",
                    )
                )

        for w in range(digraph.V):
            if not bfs.has_path_to(w) or w in source_set:
                continue
            v = bfs.edge_to(w)
            if v is None or bfs.dist_to(w) != bfs.dist_to(v) + 1:
                issues.append(
                    ValidationIssue(
                        severity="error",
                        issue_type="tree_edge_distance",
                        message=f"Tree edge into {w} from {v} does not advance the distance by exactly one.",
                        vertex=w,
                    )
                )

        for issue in issues:
            logger.error("bfs check failed (%s): %s", issue.issue_type, issue.message)
        return issues
