"""Single-source shortest paths with a lazy-deletion Dijkstra loop."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .exceptions import ConfigError, InvalidSource
from .frontier import FRONTIERS, make_frontier
from .graph import Float, GraphLike, Vertex, is_vertex
from .logger import Logger, NoopLogger
from .path import PathResult, reconstruct_path


@dataclass(frozen=True)
class ShortestPathResult:
    """Distances and predecessors produced by one solver run.

    Attributes:
        source: Vertex the distances are measured from.
        distance: Shortest distance per vertex, ``inf`` if unreachable.
        previous: Predecessor on a shortest path per vertex, ``None`` for the
            source and for unreachable vertices.
    """

    source: Vertex
    distance: List[Float]
    previous: List[Optional[Vertex]]

    def is_reachable(self, v: Vertex) -> bool:
        """Return ``True`` if ``v`` has a finite distance."""
        return self.distance[v] < math.inf

    def reachable(self) -> List[Vertex]:
        """Return the reachable vertices in ascending order."""
        return [v for v, d in enumerate(self.distance) if d < math.inf]

    def path_to(self, target: Vertex) -> PathResult:
        """Return the path from ``source`` to ``target``.

        See :func:`~dijkstrax.path.reconstruct_path`.
        """
        return reconstruct_path(self.previous, self.source, target)

    def as_dict(self) -> Dict[str, Any]:
        """Return a JSON-friendly snapshot; infinite distances become ``None``."""
        return {
            "source": self.source,
            "distance": [d if d < math.inf else None for d in self.distance],
            "previous": list(self.previous),
        }


@dataclass(frozen=True)
class SolverMetrics:
    """Performance metrics collected from a solver run."""

    n: int
    m: int
    frontier: str
    counters: Dict[str, int]
    wall_ms: float
    peak_mib: float | None = None


@dataclass(frozen=True)
class SolverConfig:
    """Configuration knobs for the solver.

    Attributes:
        frontier: ``"heap"`` (binary heap) or ``"sorted"`` (insertion-sorted
            list baseline).
    """

    frontier: str = "heap"


class DijkstraSolver:
    """Dijkstra's algorithm over a graph with non-negative edge weights.

    The frontier may hold several entries for one vertex. Entries for
    vertices that are already finalized are discarded when popped, so no
    decrease-key operation is needed.

    Negative weights are a precondition violation. They are not checked and
    the resulting distances are undefined.
    """

    def __init__(
        self,
        G: GraphLike,
        source: Vertex,
        config: Optional[SolverConfig] = None,
        logger: Logger | None = None,
    ) -> None:
        """Initialize the solver.

        Args:
            G: Input graph. It must not be mutated while :meth:`solve` runs.
            source: Source vertex identifier.
            config: Optional solver configuration.
            logger: Optional structured logger.

        Raises:
            InvalidSource: If ``source`` is not a valid vertex id.
            ConfigError: If the configured frontier is unknown.
        """
        if not is_vertex(G.n, source):
            raise InvalidSource(f"source {source!r} is not a vertex id in [0, {G.n}).")
        self.G = G
        self.source = int(source)
        self.cfg = config or SolverConfig()
        if self.cfg.frontier not in FRONTIERS:
            raise ConfigError(f"unknown frontier '{self.cfg.frontier}'")
        self.logger = logger or NoopLogger()
        self.counters: Dict[str, int] = self._fresh_counters()

    @staticmethod
    def _fresh_counters() -> Dict[str, int]:
        return {
            "pushes": 0,
            "pops": 0,
            "stale_pops": 0,
            "edges_relaxed": 0,
            "improvements": 0,
            "max_frontier_size": 0,
        }

    def solve(self) -> ShortestPathResult:
        """Run the relaxation loop and return distances and predecessors."""
        n = self.G.n
        s = self.source
        counters = self.counters = self._fresh_counters()

        distance: List[Float] = [math.inf] * n
        previous: List[Optional[Vertex]] = [None] * n
        visited: List[bool] = [False] * n
        distance[s] = 0.0

        frontier = make_frontier(self.cfg.frontier)
        frontier.push(s, 0.0)
        counters["pushes"] += 1

        while not frontier.is_empty():
            counters["max_frontier_size"] = max(counters["max_frontier_size"], len(frontier))
            u, _ = frontier.pop_min()
            counters["pops"] += 1
            # lazy deletion
            if visited[u]:
                counters["stale_pops"] += 1
                continue
            visited[u] = True
            du = distance[u]
            self.logger.debug("finalize", vertex=u, distance=du)

            for v, w in self.G.neighbors(u):
                if visited[v]:
                    continue
                counters["edges_relaxed"] += 1
                cand = du + w
                if cand < distance[v]:
                    distance[v] = cand
                    previous[v] = u
                    frontier.push(v, cand)
                    counters["pushes"] += 1
                    counters["improvements"] += 1

        self.logger.info("solve", n=n, source=s, frontier=self.cfg.frontier, **counters)
        return ShortestPathResult(source=s, distance=distance, previous=previous)

    # ---------- counters --------------------------------------------------

    def summary(self) -> Dict[str, int]:
        """Return a copy of the counters from the most recent run."""
        return dict(self.counters)

    def metrics(self, wall_ms: float, peak_mib: float | None = None) -> SolverMetrics:
        """Return performance metrics for the most recent run.

        Args:
            wall_ms: Wall-clock time spent in :meth:`solve` in milliseconds.
            peak_mib: Optional peak memory usage in MiB.
        """
        m = sum(1 for u in range(self.G.n) for _ in self.G.neighbors(u))
        return SolverMetrics(
            n=self.G.n,
            m=m,
            frontier=self.cfg.frontier,
            counters=self.summary(),
            wall_ms=wall_ms,
            peak_mib=peak_mib,
        )


def single_source_shortest_paths(
    graph: GraphLike,
    source: Vertex,
    config: Optional[SolverConfig] = None,
    logger: Logger | None = None,
) -> ShortestPathResult:
    """Compute shortest distances and predecessors from ``source``.

    Args:
        graph: Graph with non-negative edge weights.
        source: Source vertex identifier in ``[0, graph.n)``.
        config: Optional solver configuration.
        logger: Optional structured logger.

    Returns:
        A fresh :class:`ShortestPathResult`; nothing is shared between calls.

    Raises:
        InvalidSource: If ``source`` is out of range.

    Examples:
        ```python
        >>> from dijkstrax.graph import Graph
        >>> g = Graph.from_edges(3, [(0, 1, 2.0), (1, 2, 3.0)])
        >>> single_source_shortest_paths(g, 0).distance
        [0.0, 2.0, 5.0]
        ```
    """
    return DijkstraSolver(graph, source, config=config, logger=logger).solve()


def shortest_paths(graph: GraphLike, source: Vertex) -> ShortestPathResult:
    """Shorthand for :func:`single_source_shortest_paths` with default settings."""
    return single_source_shortest_paths(graph, source)


__all__ = [
    "DijkstraSolver",
    "ShortestPathResult",
    "SolverConfig",
    "SolverMetrics",
    "shortest_paths",
    "single_source_shortest_paths",
]
