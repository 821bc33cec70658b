import logging

import pytest
from typer.testing import CliRunner

from algograph.cli import app
from algograph.models import ValidationIssue
from algograph.verifier import ResultVerifier

runner = CliRunner()


@pytest.fixture(autouse=True)
def restore_root_logging():
    # the CLI reconfigures the root logger on every invocation
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for h in list(root.handlers):
        root.removeHandler(h)
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)


def test_mst_command(tiny_ewg_path):
    r = runner.invoke(app, ["mst", str(tiny_ewg_path)])
    assert r.exit_code == 0, r.output
    lines = r.stdout.splitlines()
    assert lines[-1] == "1.81000"
    assert "0-7 0.16000" in lines
    assert "2-3 0.17000" in lines
    assert len(lines) == 8


def test_mst_check_passes(tiny_ewg_path):
    r = runner.invoke(app, ["mst", str(tiny_ewg_path), "--check"])
    assert r.exit_code == 0, r.output
    assert "MST check passed" in r.output


def test_scc_command(tiny_dg_path):
    r = runner.invoke(app, ["scc", str(tiny_dg_path), "--check"])
    assert r.exit_code == 0, r.output
    lines = r.output.splitlines()
    assert lines[0] == "5 components"
    assert "0 2 3 4 5" in lines
    assert "9 10 11 12" in lines
    assert "SCC check passed" in r.output


def test_bfs_command(tiny_dg_path):
    r = runner.invoke(app, ["bfs", str(tiny_dg_path), "--source", "3"])
    assert r.exit_code == 0, r.output
    lines = r.stdout.splitlines()
    assert len(lines) == 13
    assert lines[0] == "3 to 0 (2):  3->2->0"
    assert lines[3] == "3 to 3 (0):  3"
    assert lines[6] == "3 to 6 (-):  not connected"


def test_bfs_multi_source(tiny_dg_path):
    r = runner.invoke(app, ["bfs", str(tiny_dg_path), "-s", "1", "-s", "7", "-s", "10", "--check"])
    assert r.exit_code == 0, r.output
    assert "10 to 12 (1):  10->12" in r.output
    assert "7 to 2 (3):  7->6->4->2" in r.output
    assert "BFS check passed" in r.output


def test_bad_source_is_a_usage_error(tiny_dg_path):
    r = runner.invoke(app, ["bfs", str(tiny_dg_path), "--source", "42"])
    assert r.exit_code == 2


def test_missing_file_is_a_usage_error(tmp_path):
    r = runner.invoke(app, ["mst", str(tmp_path / "missing.txt")])
    assert r.exit_code == 2


def test_malformed_file_is_a_usage_error(tmp_path):
    bad = tmp_path / "bad.txt"
    bad.write_text("3\n2\n0 1\n", encoding="utf-8")
    r = runner.invoke(app, ["scc", str(bad)])
    assert r.exit_code == 2


def test_check_findings_exit_with_code_1(tiny_ewg_path, monkeypatch):
    finding = ValidationIssue(
        severity="error",
        issue_type="cut_optimality",
        message="Edge 0-4 0.38000 violates cut optimality conditions.",
    )
    monkeypatch.setattr(ResultVerifier, "verify", lambda self, *args, **kwargs: [finding])
    r = runner.invoke(app, ["mst", str(tiny_ewg_path), "--check"])
    assert r.exit_code == 1
    assert "MST check FAILED" in r.output
    assert "cut_optimality" in r.output


def test_verbose_and_quiet_are_exclusive(tiny_ewg_path):
    r = runner.invoke(app, ["-v", "-q", "mst", str(tiny_ewg_path)])
    assert r.exit_code == 2


def test_verbose_shows_debug_summaries(tiny_ewg_path):
    r = runner.invoke(app, ["--verbose", "mst", str(tiny_ewg_path)])
    assert r.exit_code == 0, r.output
    assert logging.getLogger().level == logging.DEBUG
    assert "prim: 8 vertices, 16 edges, 1 tree(s)" in r.output


def test_quiet_raises_log_threshold(tiny_dg_path):
    r = runner.invoke(app, ["--quiet", "scc", str(tiny_dg_path)])
    assert r.exit_code == 0, r.output
    assert logging.getLogger().level == logging.ERROR
    assert "kosaraju:" not in r.output
    assert r.stdout.splitlines()[0] == "5 components"
