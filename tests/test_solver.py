"""Tests for the Dijkstra solver."""

from __future__ import annotations

import io
import math

import pytest

from dijkstrax import (
    ConfigError,
    DijkstraSolver,
    Graph,
    InvalidSource,
    NumpyGraph,
    SolverConfig,
    StdLogger,
    Unreachable,
    bellman_ford_reference,
    reconstruct_path,
    shortest_paths,
    single_source_shortest_paths,
)

FRONTIER_NAMES = ["heap", "sorted"]


def path_weight(G, path):
    total = 0.0
    for u, v in zip(path, path[1:]):
        total += G.weight(u, v)
    return total


@pytest.mark.parametrize("frontier", FRONTIER_NAMES)
def test_example_graph_distances_and_predecessors(example_graph, frontier) -> None:
    res = single_source_shortest_paths(example_graph, 0, config=SolverConfig(frontier=frontier))
    assert res.distance == [0, 3, 2, 1, 5]
    assert res.previous == [None, 2, 3, 0, 3]
    assert res.path_to(1) == [0, 3, 2, 1]
    assert res.path_to(4) == [0, 3, 4]


def test_example_graph_from_another_source(example_graph) -> None:
    res = shortest_paths(example_graph, 4)
    assert res.distance == [2, 5, 4, 3, 0]
    assert res.path_to(1) == [4, 0, 3, 2, 1]


def test_source_has_zero_distance_and_no_predecessor(example_graph) -> None:
    for s in range(example_graph.n):
        res = shortest_paths(example_graph, s)
        assert res.distance[s] == 0
        assert res.previous[s] is None


def test_reconstructed_paths_sum_to_distances(backend, random_edges) -> None:
    G = backend.from_edges(60, random_edges(60, 240, seed=3))
    res = shortest_paths(G, 0)
    for v in range(G.n):
        path = reconstruct_path(res.previous, 0, v)
        if res.is_reachable(v):
            assert path[0] == 0 and path[-1] == v
            assert path_weight(G, path) == pytest.approx(res.distance[v])
        else:
            assert isinstance(path, Unreachable)
            assert res.previous[v] is None


@pytest.mark.parametrize("seed", range(5))
def test_agrees_with_bellman_ford(random_edges, seed) -> None:
    G = Graph.from_edges(40, random_edges(40, 120, seed))
    res = shortest_paths(G, 0)
    ref = bellman_ford_reference(G, 0)
    assert res.distance == pytest.approx(ref.distance)


def test_backends_and_frontiers_give_identical_results(random_edges) -> None:
    edges = random_edges(50, 200, seed=11)
    results = [
        single_source_shortest_paths(cls.from_edges(50, edges), 0, config=SolverConfig(frontier=f))
        for cls in (Graph, NumpyGraph)
        for f in FRONTIER_NAMES
    ]
    for other in results[1:]:
        assert other == results[0]


def test_graph_without_edges(backend) -> None:
    res = shortest_paths(backend(4), 2)
    assert res.distance == [math.inf, math.inf, 0, math.inf]
    assert res.reachable() == [2]
    for v in (0, 1, 3):
        assert res.path_to(v) == Unreachable(2, v)


def test_disconnected_vertices_are_unreachable(backend) -> None:
    G = backend.from_edges(4, [(0, 1, 1.0), (2, 3, 1.0)])
    res = shortest_paths(G, 0)
    assert res.distance[:2] == [0, 1]
    assert math.isinf(res.distance[2]) and math.isinf(res.distance[3])
    assert res.previous == [None, 0, None, None]


def test_self_loops_never_change_finalized_distance(backend) -> None:
    G = backend.from_edges(2, [(0, 0, 0.0), (0, 1, 1.0), (1, 1, 5.0)])
    res = shortest_paths(G, 0)
    assert res.distance == [0, 1]
    assert res.previous == [None, 0]


def test_zero_weight_edges(backend) -> None:
    G = backend.from_edges(3, [(0, 1, 0), (1, 2, 0), (0, 2, 1)])
    res = shortest_paths(G, 0)
    assert res.distance == [0, 0, 0]
    assert res.previous == [None, 0, 1]


def test_repeated_runs_are_identical_and_independent(example_graph) -> None:
    first = shortest_paths(example_graph, 0)
    second = shortest_paths(example_graph, 0)
    assert first == second
    first.distance[1] = -1.0
    assert second.distance[1] == 3


def test_heavier_edge_never_decreases_distances(example_edges) -> None:
    G = Graph.from_edges(5, example_edges)
    before = shortest_paths(G, 0).distance
    G.add_edge(0, 4, before[4] + 1)
    G.add_edge(3, 1, 10)
    after = shortest_paths(G, 0).distance
    assert all(a >= b for a, b in zip(after, before))


def test_adding_inf_weight_edge_has_no_effect(example_edges) -> None:
    G = Graph.from_edges(5, example_edges)
    before = shortest_paths(G, 0)
    G.add_edge(0, 2, math.inf)
    assert shortest_paths(G, 0) == before


@pytest.mark.parametrize("source", [-1, 5, 1.0, True, None])
def test_invalid_source_raises(example_graph, source) -> None:
    with pytest.raises(InvalidSource):
        shortest_paths(example_graph, source)


def test_empty_graph_has_no_valid_source() -> None:
    with pytest.raises(InvalidSource):
        shortest_paths(Graph(0), 0)


def test_unknown_frontier_is_a_config_error(example_graph) -> None:
    with pytest.raises(ConfigError):
        DijkstraSolver(example_graph, 0, config=SolverConfig(frontier="fibonacci"))


def test_negative_weights_are_not_rejected() -> None:
    G = Graph.from_edges(3, [(0, 1, 2.0), (1, 2, -1.0)])
    res = shortest_paths(G, 0)
    assert len(res.distance) == 3


def test_counters_track_lazy_deletion(example_graph) -> None:
    solver = DijkstraSolver(example_graph, 0)
    solver.solve()
    assert solver.summary() == {
        "pushes": 6,
        "pops": 6,
        "stale_pops": 1,
        "edges_relaxed": 6,
        "improvements": 5,
        "max_frontier_size": 3,
    }
    metrics = solver.metrics(wall_ms=1.5)
    assert (metrics.n, metrics.m, metrics.frontier) == (5, 10, "heap")
    assert metrics.counters["stale_pops"] == 1


def test_solver_logs_finalized_vertices(example_graph) -> None:
    stream = io.StringIO()
    logger = StdLogger(level="debug", stream=stream)
    single_source_shortest_paths(example_graph, 0, logger=logger)
    lines = stream.getvalue().splitlines()
    assert sum(1 for line in lines if line.startswith("debug finalize")) == 5
    assert lines[-1].startswith("info solve n=5 source=0 frontier=heap")


def test_result_snapshot() -> None:
    res = shortest_paths(Graph.from_edges(3, [(0, 1, 2.5)]), 0)
    assert res.as_dict() == {
        "source": 0,
        "distance": [0.0, 2.5, None],
        "previous": [None, 0, None],
    }
