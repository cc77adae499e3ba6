"""NumPy-backed dense graph representation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple

import numpy as np
import numpy.typing as npt

from .exceptions import InputError
from .graph import ABSENT, Edge, Float, Graph, Vertex, check_vertex_count, coerce_weight, is_vertex


@dataclass
class NumpyGraph:
    """Directed graph stored as an ``n x n`` weight matrix.

    Absent edges hold ``inf``. The contract matches :class:`~dijkstrax.graph.Graph`:
    later insertions overwrite, out-of-range endpoints are ignored unless
    ``strict`` is set, and non-finite weights mean "no edge".
    """

    n: int
    strict: bool = False

    def __post_init__(self) -> None:
        """Validate the vertex count and allocate the weight matrix."""
        self.n = check_vertex_count(self.n)
        self.weights: npt.NDArray[np.float64] = np.full(
            (self.n, self.n), np.inf, dtype=np.float64
        )

    def add_edge(self, u: Vertex, v: Vertex, w: Float) -> None:
        """Set the weight of the directed edge from ``u`` to ``v``."""
        if not (is_vertex(self.n, u) and is_vertex(self.n, v)):
            if self.strict:
                raise InputError(f"edge ({u}, {v}) has endpoints outside [0, {self.n}).")
            return
        self.weights[u, v] = coerce_weight(u, v, w)

    def neighbors(self, source: Vertex) -> Iterator[Tuple[Vertex, Float]]:
        """Yield ``(destination, weight)`` for present edges, ascending by destination."""
        if not is_vertex(self.n, source):
            return
        row = self.weights[source]
        for v in np.flatnonzero(np.isfinite(row)):
            yield int(v), float(row[v])

    def weight(self, u: Vertex, v: Vertex) -> Float:
        """Return ``w(u, v)`` or ``inf`` if the edge is absent."""
        if not (is_vertex(self.n, u) and is_vertex(self.n, v)):
            return ABSENT
        return float(self.weights[u, v])

    def has_edge(self, u: Vertex, v: Vertex) -> bool:
        """Return ``True`` if an edge from ``u`` to ``v`` is present."""
        return self.weight(u, v) != ABSENT

    def out_degree(self, u: Vertex) -> int:
        """Return the number of edges leaving ``u``."""
        if not is_vertex(self.n, u):
            return 0
        return int(np.count_nonzero(np.isfinite(self.weights[u])))

    def edge_count(self) -> int:
        """Return the number of present edges."""
        return int(np.count_nonzero(np.isfinite(self.weights)))

    def edges(self) -> Iterator[Edge]:
        """Iterate over all present edges as ``(u, v, w)``."""
        for u in range(self.n):
            for v, w in self.neighbors(u):
                yield u, v, w

    @classmethod
    def from_edges(cls, n: int, edges: Iterable[Edge], strict: bool = False) -> "NumpyGraph":
        """Construct a graph from an iterable of ``(u, v, w)`` edges."""
        g = cls(n, strict=strict)
        for u, v, w in edges:
            g.add_edge(u, v, w)
        return g

    @classmethod
    def from_graph(cls, graph: Graph) -> "NumpyGraph":
        """Return a dense copy of a sparse :class:`~dijkstrax.graph.Graph`."""
        return cls.from_edges(graph.n, graph.edges(), strict=graph.strict)

    def to_graph(self) -> Graph:
        """Return a sparse :class:`~dijkstrax.graph.Graph` copy of this graph."""
        return Graph.from_edges(self.n, self.edges(), strict=self.strict)


__all__ = ["NumpyGraph"]
