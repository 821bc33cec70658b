from pathlib import Path

import pytest

from algograph.io import read_digraph, read_edge_weighted_graph

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def tiny_ewg_path() -> Path:
    return DATA_DIR / "tinyEWG.txt"


@pytest.fixture
def tiny_dg_path() -> Path:
    return DATA_DIR / "tinyDG.txt"


@pytest.fixture
def tiny_ewg(tiny_ewg_path):
    return read_edge_weighted_graph(str(tiny_ewg_path))


@pytest.fixture
def tiny_dg(tiny_dg_path):
    return read_digraph(str(tiny_dg_path))
