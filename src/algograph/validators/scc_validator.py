from __future__ import annotations

import logging
from typing import List

import numpy as np

from algograph.algorithms.kosaraju_scc import KosarajuSharirSCC
from algograph.models import ValidationIssue
from algograph.topology.graph import Digraph

logger = logging.getLogger(__name__)


def transitive_closure(digraph: Digraph) -> np.ndarray:
    """Boolean V x V matrix, reach[v, w] is True iff w is reachable from v.

    Warshall's algorithm, one vectorised row update per intermediate vertex.
    Every vertex reaches itself.
    """
    V = digraph.V
    reach = np.eye(V, dtype=bool)
    for v, w in digraph.edges():
        reach[v, w] = True
    for k in range(V):
        reach |= np.outer(reach[:, k], reach[k, :])
    return reach


class SCCValidator:
    """Checks a component labeling against mutual reachability.

    Needs O(V^2) memory for the closure matrix and O(V^3) time.
    """

    def validate(self, digraph: Digraph, scc: KosarajuSharirSCC) -> List[ValidationIssue]:
        issues: List[ValidationIssue] = []
        ids = np.asarray(scc.ids(), dtype=int).reshape(-1)
        count = scc.count()

        if ids.shape[0] != digraph.V:
            issues.append(
                ValidationIssue(
                    severity="error",
                    issue_type="size_mismatch",
                    message=f"Labeling covers {ids.shape[0]} vertices but the digraph has {digraph.V}.",
                )
            )
            return self._report(issues)

        out_of_range = [v for v, cid in enumerate(ids.tolist()) if not 0 <= cid < count]
        for v in out_of_range:
            issues.append(
                ValidationIssue(
                    severity="error",
                    issue_type="invalid_component_id",
                    message=f"Vertex {v} has id {ids[v]} outside 0..{count - 1}.",
                    vertex=v,
                )
            )
        if count and len(set(ids.tolist())) != count:
            issues.append(
                ValidationIssue(
                    severity="error",
                    issue_type="empty_component",
                    message=f"count() is {count} but only {len(set(ids.tolist()))} id(s) are used.",
                )
            )
        if issues:
            return self._report(issues)

        reach = transitive_closure(digraph)
        mutual = reach & reach.T
        same_id = ids[:, None] == ids[None, :]
        for v, w in np.argwhere(mutual != same_id).tolist():
            if v > w:
                continue
            expected = "mutually reachable" if mutual[v, w] else "not mutually reachable"
            issues.append(
                ValidationIssue(
                    severity="error",
                    issue_type="component_mismatch",
                    message=f"Vertices {v} and {w} are {expected} but have ids {ids[v]} and {ids[w]}.",
                    vertex=v,
                )
            )
        return self._report(issues)

    def _report(self, issues: List[ValidationIssue]) -> List[ValidationIssue]:
        for issue in issues:
            logger.error("scc check failed (%s): %s", issue.issue_type, issue.message)
        return issues
