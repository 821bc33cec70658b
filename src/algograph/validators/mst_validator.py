from __future__ import annotations

import logging
from typing import List

from algograph.algorithms.prim_mst import PrimMST
from algograph.models import ValidationIssue
from algograph.topology.graph import EdgeWeightedGraph, UnionFind

logger = logging.getLogger(__name__)


class MSTValidator:
    """Optimality checks for a minimum spanning forest.

    What it catches:
      - weight() disagreeing with the summed forest edges
      - cycles among the forest edges
      - graph edges whose endpoints the forest leaves in different trees
      - forest edges beaten by a cheaper edge across their cut

    Cost is O(E V) union-find work; use it for diagnostics, not hot paths.
    """

    def __init__(self, epsilon: float = 1e-12):
        self.epsilon = epsilon

    def validate(self, graph: EdgeWeightedGraph, mst: PrimMST) -> List[ValidationIssue]:
        issues: List[ValidationIssue] = []
        forest = mst.edges()
        graph_edges = graph.edges()

        for e in forest:
            if max(e.v, e.w) >= graph.V:
                issues.append(
                    ValidationIssue(
                        severity="error",
                        issue_type="size_mismatch",
                        message=f"Forest edge {e} names a vertex outside 0..{graph.V - 1}.",
                        edge=str(e),
                    )
                )
        if issues:
            return self._report(issues)

        total = 0.0
        for e in forest:
            total += e.weight
        if abs(total - mst.weight()) > self.epsilon:
            issues.append(
                ValidationIssue(
                    severity="error",
                    issue_type="weight_mismatch",
                    message=f"Weight of edges does not equal weight(): {total:f} vs. {mst.weight():f}",
                )
            )

        uf = UnionFind(graph.V)
        for e in forest:
            v = e.either()
            w = e.other(v)
            if uf.connected(v, w):
                issues.append(
                    ValidationIssue(
                        severity="error",
                        issue_type="not_a_forest",
                        message=f"Edge {e} closes a cycle in the forest.",
                        vertex=v,
                        edge=str(e),
                    )
                )
                return self._report(issues)
            uf.union(v, w)

        for e in graph_edges:
            v = e.either()
            w = e.other(v)
            if not uf.connected(v, w):
                issues.append(
                    ValidationIssue(
                        severity="error",
                        issue_type="not_spanning",
                        message=f"Graph edge {e} joins two different trees of the forest.",
                        vertex=v,
                        edge=str(e),
                    )
                )
        if issues:
            return self._report(issues)

        # cut optimality: drop e, nothing crossing the resulting cut may be cheaper
        for e in forest:
            uf = UnionFind(graph.V)
            for f in forest:
                if f is not e:
                    x = f.either()
                    uf.union(x, f.other(x))
            for f in graph_edges:
                x = f.either()
                y = f.other(x)
                if not uf.connected(x, y) and f.weight < e.weight:
                    issues.append(
                        ValidationIssue(
                            severity="error",
                            issue_type="cut_optimality",
                            message=f"Edge {f} violates cut optimality conditions for forest edge {e}.",
                            vertex=x,
                            edge=str(f),
                        )
                    )

        return self._report(issues)

    def _report(self, issues: List[ValidationIssue]) -> List[ValidationIssue]:
        for issue in issues:
            logger.error("mst check failed (%s): %s", issue.issue_type, issue.message)
        return issues
