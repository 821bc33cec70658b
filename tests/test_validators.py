import logging

import numpy as np
import pytest

from algograph.algorithms import BreadthFirstDirectedPaths, KosarajuSharirSCC, PrimMST
from algograph.models import Edge
from algograph.topology import Digraph, EdgeWeightedGraph
from algograph.validators import BFSPathsValidator, MSTValidator, SCCValidator, transitive_closure
from algograph.verifier import ResultVerifier


class _FakeForest:
    """Stands in for PrimMST with a hand-picked edge list."""

    def __init__(self, edges, weight=None):
        self._edges = list(edges)
        self._weight = weight

    def edges(self):
        return list(self._edges)

    def weight(self):
        if self._weight is not None:
            return self._weight
        return sum(e.weight for e in self._edges)


class _FakeLabels:
    def __init__(self, ids):
        self._ids = list(ids)

    def ids(self):
        return list(self._ids)

    def count(self):
        return len(set(self._ids))


class _FakePaths:
    def __init__(self, dist, edge_to):
        self._dist = dist
        self._edge_to = edge_to

    def has_path_to(self, v):
        return self._dist[v] != float("inf")

    def dist_to(self, v):
        return self._dist[v]

    def edge_to(self, v):
        return self._edge_to[v]


def _square():
    # 0-1-2-3-0 cycle plus a heavy diagonal
    edges = [Edge(0, 1, 1.0), Edge(1, 2, 2.0), Edge(2, 3, 3.0), Edge(3, 0, 4.0), Edge(0, 2, 5.0)]
    return EdgeWeightedGraph.from_edges(4, edges), edges


def test_mst_validator_accepts_prim_result(tiny_ewg):
    assert MSTValidator().validate(tiny_ewg, PrimMST(tiny_ewg)) == []


def test_mst_validator_reports_weight_mismatch():
    g, edges = _square()
    issues = MSTValidator().validate(g, _FakeForest(edges[:3], weight=99.0))
    assert [i.issue_type for i in issues] == ["weight_mismatch"]


def test_mst_validator_reports_cycle():
    g, edges = _square()
    issues = MSTValidator().validate(g, _FakeForest(edges[:4]))
    assert [i.issue_type for i in issues] == ["not_a_forest"]
    assert issues[0].edge == "3-0 4.00000"


def test_mst_validator_reports_missing_span():
    g, edges = _square()
    issues = MSTValidator().validate(g, _FakeForest(edges[:2]))
    assert issues
    assert {i.issue_type for i in issues} == {"not_spanning"}


def test_mst_validator_reports_cut_violation(caplog):
    g, edges = _square()
    # spanning tree using the diagonal instead of 1-2
    forest = _FakeForest([edges[0], edges[4], edges[2]])
    with caplog.at_level(logging.ERROR, logger="algograph.validators.mst_validator"):
        issues = MSTValidator().validate(g, forest)
    assert issues
    assert {i.issue_type for i in issues} == {"cut_optimality"}
    assert any("violates cut optimality" in r.getMessage() for r in caplog.records)


def test_transitive_closure_matrix():
    g = Digraph.from_edges(3, [(0, 1), (1, 2)])
    reach = transitive_closure(g)
    assert reach.dtype == bool
    assert np.array_equal(reach, np.array([[1, 1, 1], [0, 1, 1], [0, 0, 1]], dtype=bool))


def test_scc_validator_accepts_kosaraju_result(tiny_dg):
    assert SCCValidator().validate(tiny_dg, KosarajuSharirSCC(tiny_dg)) == []


def test_scc_validator_reports_merged_components():
    g = Digraph.from_edges(3, [(0, 1), (1, 0), (1, 2)])
    issues = SCCValidator().validate(g, _FakeLabels([0, 0, 0]))
    assert len(issues) == 2
    assert {i.issue_type for i in issues} == {"component_mismatch"}


def test_scc_validator_reports_split_component():
    g = Digraph.from_edges(2, [(0, 1), (1, 0)])
    issues = SCCValidator().validate(g, _FakeLabels([0, 1]))
    assert [i.issue_type for i in issues] == ["component_mismatch"]


def test_bfs_validator_accepts_bfs_result(tiny_dg):
    bfs = BreadthFirstDirectedPaths(tiny_dg, 3)
    assert BFSPathsValidator().validate(tiny_dg, bfs, 3) == []


def test_bfs_validator_reports_long_distance():
    inf = float("inf")
    g = Digraph.from_edges(3, [(0, 1), (1, 2), (0, 2)])
    paths = _FakePaths(dist=[0, 1, 2], edge_to=[None, 0, 1])
    issues = BFSPathsValidator().validate(g, paths, [0])
    assert [i.issue_type for i in issues] == ["edge_not_relaxed"]

    paths = _FakePaths(dist=[0, 1, inf], edge_to=[None, 0, None])
    issues = BFSPathsValidator().validate(g, paths, [0])
    assert {i.issue_type for i in issues} == {"unreached_neighbour"}


def test_verifier_dispatches_by_result_type(tiny_ewg, tiny_dg):
    verifier = ResultVerifier()
    assert verifier.verify(tiny_ewg, PrimMST(tiny_ewg)) == []
    assert verifier.verify(tiny_dg, KosarajuSharirSCC(tiny_dg)) == []
    assert verifier.verify(tiny_dg, BreadthFirstDirectedPaths(tiny_dg, [1, 7]), [1, 7]) == []

    with pytest.raises(ValueError):
        verifier.verify(tiny_dg, BreadthFirstDirectedPaths(tiny_dg, 0))
    with pytest.raises(TypeError):
        verifier.verify(tiny_dg, object())


def test_mst_validator_reports_forest_outside_graph():
    g, edges = _square()
    issues = MSTValidator().validate(g, _FakeForest(edges[:2] + [Edge(3, 9, 1.0)]))
    assert [i.issue_type for i in issues] == ["size_mismatch"]
    assert issues[0].edge == "3-9 1.00000"


def test_scc_validator_reports_labeling_of_wrong_size():
    g = Digraph.from_edges(3, [(0, 1), (1, 0)])
    assert [i.issue_type for i in SCCValidator().validate(g, _FakeLabels([0, 0]))] == ["size_mismatch"]
    assert [i.issue_type for i in SCCValidator().validate(g, _FakeLabels([0, 0, 1, 2]))] == ["size_mismatch"]
