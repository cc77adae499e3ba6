"""Custom exception types used across :mod:`dijkstrax`."""

from __future__ import annotations


class DijkstraXError(Exception):
    """Base class for all package-specific errors."""


class InputError(DijkstraXError, ValueError):
    """Raised for invalid caller input such as non-numeric weights."""


class InvalidSize(InputError):
    """Raised when a graph is requested with a negative vertex count."""


class InvalidSource(InputError):
    """Raised when the source vertex is outside ``[0, n)``."""


class ConfigError(DijkstraXError, ValueError):
    """Raised for invalid configuration options."""


class EmptyFrontier(DijkstraXError, IndexError):
    """Raised when extracting from a frontier that holds no entries.

    The solver checks emptiness before extracting, so this never escapes a
    shortest-path computation.
    """


class AlgorithmError(DijkstraXError, RuntimeError):
    """Raised when algorithm invariants are violated at runtime."""


__all__ = [
    "DijkstraXError",
    "InputError",
    "InvalidSize",
    "InvalidSource",
    "ConfigError",
    "EmptyFrontier",
    "AlgorithmError",
]
