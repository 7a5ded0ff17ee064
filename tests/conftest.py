"""
Shared fixtures for the labeling test suite
"""

import matplotlib
matplotlib.use("Agg")

import pytest

from labeling.graph_loader import Graph, EdgeListLoader


@pytest.fixture
def triangle():
    return Graph.build_from_edges([(0, 1), (1, 2), (2, 0)])


@pytest.fixture
def path3():
    return Graph.build_from_edges([(0, 1), (1, 2)])


@pytest.fixture
def star3():
    return Graph.build_from_edges([(0, 1), (0, 2), (0, 3)])


@pytest.fixture
def wheel4():
    return Graph.build_wheel(4)


@pytest.fixture
def loader():
    return EdgeListLoader()
