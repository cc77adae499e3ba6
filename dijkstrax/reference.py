"""Reference Bellman-Ford implementation used to cross-check the solver."""

from __future__ import annotations

import math
from typing import List, Optional, Tuple

from .exceptions import InvalidSource
from .graph import Float, GraphLike, Vertex, is_vertex
from .solver import ShortestPathResult


def bellman_ford_reference(G: GraphLike, source: Vertex) -> ShortestPathResult:
    """Run plain Bellman-Ford relaxation rounds from ``source``.

    Stops early once a round makes no improvement. Predecessors may differ
    from Dijkstra's when several shortest paths tie; distances do not.

    Args:
        G: Input graph with non-negative edge weights.
        source: Source vertex identifier.

    Returns:
        Distances and predecessors.
    """
    if not is_vertex(G.n, source):
        raise InvalidSource(f"source {source!r} is not a vertex id in [0, {G.n}).")
    n = G.n
    edges: List[Tuple[Vertex, Vertex, Float]] = [
        (u, v, w) for u in range(n) for v, w in G.neighbors(u)
    ]
    dist: List[Float] = [math.inf] * n
    pred: List[Optional[Vertex]] = [None] * n
    dist[source] = 0.0

    for _ in range(max(0, n - 1)):
        updated = False
        for u, v, w in edges:
            du = dist[u]
            if du == math.inf:
                continue
            nd = du + w
            if nd < dist[v]:
                dist[v] = nd
                pred[v] = u
                updated = True
        if not updated:
            break

    return ShortestPathResult(source=int(source), distance=dist, previous=pred)


__all__ = ["bellman_ford_reference"]
