"""Frontier data structures used by the solver."""

from __future__ import annotations

import heapq
import itertools
from bisect import insort
from typing import Callable, Dict, List, NamedTuple, Protocol, Tuple

from .exceptions import ConfigError, EmptyFrontier

Vertex = int
Float = float


class FrontierEntry(NamedTuple):
    """A candidate ``(vertex, distance)`` pair held by a frontier."""

    vertex: Vertex
    distance: Float


class FrontierProtocol(Protocol):
    """Protocol for frontier structures consumed by the solver."""

    def push(self, vertex: Vertex, distance: Float) -> None:
        """Insert a candidate entry."""
        ...

    def pop_min(self) -> FrontierEntry:
        """Remove and return an entry with the smallest distance."""
        ...

    def peek(self) -> FrontierEntry:
        """Return an entry with the smallest distance without removing it."""
        ...

    def is_empty(self) -> bool:
        """Report whether no entries remain."""
        ...

    def __len__(self) -> int:
        ...


class HeapFrontier:
    """Frontier based on a binary heap.

    ``push`` and ``pop_min`` run in ``O(log k)`` for ``k`` held entries.
    Entries for the same vertex are not merged; the solver discards the
    stale ones when they surface. Equal distances pop in insertion order.
    """

    name = "heap"

    def __init__(self) -> None:
        """Initialize an empty frontier."""
        self._heap: List[Tuple[Float, int, Vertex]] = []
        self._seq = itertools.count()

    def push(self, vertex: Vertex, distance: Float) -> None:
        """Insert ``vertex`` with tentative ``distance``."""
        heapq.heappush(self._heap, (distance, next(self._seq), vertex))

    def pop_min(self) -> FrontierEntry:
        """Remove and return the entry with the smallest distance.

        Raises:
            EmptyFrontier: If no entries remain.
        """
        if not self._heap:
            raise EmptyFrontier("pop_min on an empty frontier")
        distance, _, vertex = heapq.heappop(self._heap)
        return FrontierEntry(vertex, distance)

    def peek(self) -> FrontierEntry:
        """Return the entry with the smallest distance without removing it."""
        if not self._heap:
            raise EmptyFrontier("peek on an empty frontier")
        distance, _, vertex = self._heap[0]
        return FrontierEntry(vertex, distance)

    def is_empty(self) -> bool:
        """Report whether no entries remain."""
        return not self._heap

    def __len__(self) -> int:
        return len(self._heap)


class SortedFrontier:
    """Frontier kept as an insertion-sorted list.

    ``push`` is ``O(k)`` because of the list insert, and ``pop_min`` shifts
    the head off the list. Mostly useful as a baseline for small graphs and
    for benchmarking against :class:`HeapFrontier`.
    """

    name = "sorted"

    def __init__(self) -> None:
        """Initialize an empty frontier."""
        self._items: List[Tuple[Float, int, Vertex]] = []
        self._seq = itertools.count()

    def push(self, vertex: Vertex, distance: Float) -> None:
        """Insert ``vertex`` after every entry with distance <= ``distance``."""
        insort(self._items, (distance, next(self._seq), vertex))

    def pop_min(self) -> FrontierEntry:
        """Remove and return the head of the list.

        Raises:
            EmptyFrontier: If no entries remain.
        """
        if not self._items:
            raise EmptyFrontier("pop_min on an empty frontier")
        distance, _, vertex = self._items.pop(0)
        return FrontierEntry(vertex, distance)

    def peek(self) -> FrontierEntry:
        """Return the head of the list without removing it."""
        if not self._items:
            raise EmptyFrontier("peek on an empty frontier")
        distance, _, vertex = self._items[0]
        return FrontierEntry(vertex, distance)

    def is_empty(self) -> bool:
        """Report whether no entries remain."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)


FRONTIERS: Dict[str, Callable[[], FrontierProtocol]] = {
    HeapFrontier.name: HeapFrontier,
    SortedFrontier.name: SortedFrontier,
}


def make_frontier(name: str) -> FrontierProtocol:
    """Return a new empty frontier of the named kind.

    Raises:
        ConfigError: If ``name`` is not a known frontier.
    """
    try:
        factory = FRONTIERS[name]
    except KeyError:
        raise ConfigError(f"unknown frontier '{name}'") from None
    return factory()


__all__ = [
    "FRONTIERS",
    "FrontierEntry",
    "FrontierProtocol",
    "HeapFrontier",
    "SortedFrontier",
    "make_frontier",
]
