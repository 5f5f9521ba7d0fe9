from pathlib import Path

import pytest

from cavepaths.graph import CaveGraph
from cavepaths.parsing import load_edges

DATA = Path(__file__).resolve().parent.parent / "data"

SMALL = [("start", "A"), ("start", "b"), ("A", "c"), ("A", "b"),
         ("b", "d"), ("A", "end"), ("b", "end")]


@pytest.fixture
def data_dir():
    return DATA


@pytest.fixture
def small_graph():
    return CaveGraph.build(SMALL)


@pytest.fixture
def medium_graph():
    return CaveGraph.build(load_edges(str(DATA / "sample_medium.txt")))


@pytest.fixture
def large_graph():
    return CaveGraph.build(load_edges(str(DATA / "sample_large.txt")))
