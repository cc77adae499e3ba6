"""Directed weighted graph store used by the solver."""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Protocol, Tuple

from .exceptions import InputError, InvalidSize

Vertex = int
Float = float
Edge = Tuple[Vertex, Vertex, Float]

ABSENT: Float = math.inf


class GraphLike(Protocol):
    """Protocol for graph stores consumed by the solver."""

    n: int

    def neighbors(self, source: Vertex) -> Iterator[Tuple[Vertex, Float]]:
        """Yield ``(destination, weight)`` for each present edge."""
        ...


def check_vertex_count(n: object) -> int:
    """Return ``n`` as an ``int`` or raise :class:`InvalidSize`."""
    if isinstance(n, bool) or not isinstance(n, numbers.Integral):
        raise InvalidSize(f"vertex count must be an integer, got {n!r}")
    if n < 0:
        raise InvalidSize(f"vertex count must be non-negative, got {n}")
    return int(n)


def is_vertex(n: int, u: object) -> bool:
    """Return ``True`` if ``u`` is an integer vertex id in ``[0, n)``."""
    if isinstance(u, bool) or not isinstance(u, numbers.Integral):
        return False
    return 0 <= u < n


def coerce_weight(u: object, v: object, w: object) -> Float:
    """Return ``w`` as a float; non-finite values collapse to :data:`ABSENT`."""
    if not isinstance(w, numbers.Real):
        raise InputError(f"non-numeric weight {w!r} on edge ({u}, {v})")
    w = float(w)
    if not math.isfinite(w):
        return ABSENT
    return w


@dataclass
class Graph:
    """Directed graph with at most one weight per ordered vertex pair.

    Vertices are the integers ``0`` .. ``n-1``. Inserting an edge for a pair
    that already has one overwrites the old weight. A non-finite weight
    stands for "no edge", so inserting one leaves the pair absent.

    Out-of-range endpoints are ignored unless ``strict`` is set, in which
    case they raise :class:`~dijkstrax.exceptions.InputError`.

    Negative weights are stored as given. The solver assumes non-negative
    weights and its results are undefined otherwise.

    Attributes:
        n: Number of vertices.
        strict: Reject out-of-range endpoints instead of ignoring them.
        adj: Outgoing weights per vertex, keyed by destination.
    """

    n: int
    strict: bool = False

    def __post_init__(self) -> None:
        """Validate vertex count and initialize adjacency maps."""
        self.n = check_vertex_count(self.n)
        self.adj: List[Dict[Vertex, Float]] = [{} for _ in range(self.n)]

    def add_edge(self, u: Vertex, v: Vertex, w: Float) -> None:
        """Set the weight of the directed edge from ``u`` to ``v``.

        Args:
            u: Tail vertex.
            v: Head vertex.
            w: Edge weight; ``inf`` or ``nan`` means "no edge".

        Raises:
            InputError: If ``w`` is not a real number, or if ``strict`` is set
                and ``u`` or ``v`` is out of range.

        Examples:
            ```python
            >>> g = Graph(2)
            >>> g.add_edge(0, 1, 1.5)
            >>> g.add_edge(0, 7, 3.0)
            >>> list(g.neighbors(0))
            [(1, 1.5)]
            ```
        """
        if not (is_vertex(self.n, u) and is_vertex(self.n, v)):
            if self.strict:
                raise InputError(f"edge ({u}, {v}) has endpoints outside [0, {self.n}).")
            return
        weight = coerce_weight(u, v, w)
        row = self.adj[u]
        if weight == ABSENT:
            row.pop(int(v), None)
        else:
            row[int(v)] = weight

    def neighbors(self, source: Vertex) -> Iterator[Tuple[Vertex, Float]]:
        """Yield ``(destination, weight)`` for every edge leaving ``source``.

        Destinations come out in ascending order. The sequence is rebuilt
        from the store on each call; an out-of-range ``source`` yields
        nothing.
        """
        if not is_vertex(self.n, source):
            return
        row = self.adj[source]
        for v in sorted(row):
            yield v, row[v]

    def weight(self, u: Vertex, v: Vertex) -> Float:
        """Return ``w(u, v)`` or ``inf`` if the edge is absent."""
        if not (is_vertex(self.n, u) and is_vertex(self.n, v)):
            return ABSENT
        return self.adj[u].get(v, ABSENT)

    def has_edge(self, u: Vertex, v: Vertex) -> bool:
        """Return ``True`` if an edge from ``u`` to ``v`` is present."""
        return self.weight(u, v) != ABSENT

    def out_degree(self, u: Vertex) -> int:
        """Return the number of edges leaving ``u``."""
        if not is_vertex(self.n, u):
            return 0
        return len(self.adj[u])

    def edge_count(self) -> int:
        """Return the number of present edges."""
        return sum(len(row) for row in self.adj)

    def edges(self) -> Iterator[Edge]:
        """Iterate over all present edges as ``(u, v, w)``."""
        for u in range(self.n):
            for v, w in self.neighbors(u):
                yield u, v, w

    @classmethod
    def from_edges(cls, n: int, edges: Iterable[Edge], strict: bool = False) -> "Graph":
        """Create a graph from an iterable of ``(u, v, w)`` edges.

        Args:
            n: Number of vertices.
            edges: Edges to insert in order; later duplicates overwrite.
            strict: Passed through to the constructor.

        Returns:
            A graph populated with the provided edges.
        """
        g = cls(n, strict=strict)
        for u, v, w in edges:
            g.add_edge(u, v, w)
        return g


def create_graph(vertex_count: int, strict: bool = False) -> Graph:
    """Return an empty :class:`Graph` with ``vertex_count`` vertices."""
    return Graph(vertex_count, strict=strict)


def add_edge(graph: Graph, source: Vertex, destination: Vertex, weight: Float) -> None:
    """Insert an edge into ``graph``; see :meth:`Graph.add_edge`."""
    graph.add_edge(source, destination, weight)


__all__ = [
    "ABSENT",
    "Edge",
    "Graph",
    "GraphLike",
    "add_edge",
    "create_graph",
]
