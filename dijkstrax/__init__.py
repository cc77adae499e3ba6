"""Public package exports for :mod:`dijkstrax`."""

from __future__ import annotations

from .exceptions import (
    AlgorithmError,
    ConfigError,
    DijkstraXError,
    EmptyFrontier,
    InputError,
    InvalidSize,
    InvalidSource,
)
from .frontier import FrontierEntry, HeapFrontier, SortedFrontier, make_frontier
from .graph import Graph, add_edge, create_graph
from .graph_numpy import NumpyGraph
from .logger import Logger, NoopLogger, StdLogger
from .path import Unreachable, reconstruct_path
from .reference import bellman_ford_reference
from .solver import (
    DijkstraSolver,
    ShortestPathResult,
    SolverConfig,
    SolverMetrics,
    shortest_paths,
    single_source_shortest_paths,
)

__version__ = "0.1.0"

__all__ = [
    "Graph",
    "NumpyGraph",
    "create_graph",
    "add_edge",
    "DijkstraSolver",
    "ShortestPathResult",
    "SolverConfig",
    "SolverMetrics",
    "shortest_paths",
    "single_source_shortest_paths",
    "reconstruct_path",
    "Unreachable",
    "FrontierEntry",
    "HeapFrontier",
    "SortedFrontier",
    "make_frontier",
    "bellman_ford_reference",
    "Logger",
    "NoopLogger",
    "StdLogger",
    "DijkstraXError",
    "InputError",
    "InvalidSize",
    "InvalidSource",
    "ConfigError",
    "EmptyFrontier",
    "AlgorithmError",
]
