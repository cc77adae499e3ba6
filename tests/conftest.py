"""Shared fixtures for the dijkstrax test suite."""

from __future__ import annotations

import random
from typing import List, Tuple

import pytest

from dijkstrax.graph import Graph
from dijkstrax.graph_numpy import NumpyGraph

EXAMPLE_EDGES: List[Tuple[int, int, float]] = [
    (0, 1, 6),
    (0, 3, 1),
    (1, 2, 5),
    (1, 3, 2),
    (1, 4, 2),
    (2, 1, 1),
    (3, 2, 1),
    (3, 4, 4),
    (4, 0, 2),
    (4, 2, 8),
]


def random_graph_edges(n: int, m: int, seed: int) -> List[Tuple[int, int, float]]:
    rnd = random.Random(seed)
    return [(rnd.randrange(n), rnd.randrange(n), rnd.random() * 10.0) for _ in range(m)]


@pytest.fixture(params=[Graph, NumpyGraph], ids=["dict", "numpy"])
def backend(request):
    return request.param


@pytest.fixture
def example_graph(backend):
    return backend.from_edges(5, EXAMPLE_EDGES)


@pytest.fixture
def example_edges():
    return list(EXAMPLE_EDGES)


@pytest.fixture
def random_edges():
    return random_graph_edges
