"""Utilities for reconstructing paths from predecessor arrays."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Union

from .exceptions import AlgorithmError, InputError
from .graph import Vertex, is_vertex


@dataclass(frozen=True)
class Unreachable:
    """Outcome of :func:`reconstruct_path` when ``target`` has no path.

    This is a normal result rather than an error, and it is falsy so callers
    can write ``if path: ...``.
    """

    source: Vertex
    target: Vertex

    def __bool__(self) -> bool:
        return False

    def __str__(self) -> str:
        return f"vertex {self.target} is unreachable from {self.source}"


PathResult = Union[List[Vertex], Unreachable]


def reconstruct_path(
    previous: Sequence[Optional[Vertex]],
    source: Vertex,
    target: Vertex,
) -> PathResult:
    """Return the path from ``source`` to ``target`` using a predecessor array.

    Args:
        previous: Predecessor of each vertex, ``None`` for the source and for
            unreached vertices.
        source: Source vertex identifier.
        target: Target vertex identifier.

    Returns:
        Vertices from source to target (inclusive), or :class:`Unreachable`
        if the predecessor chain from ``target`` never reaches ``source``.

    Raises:
        InputError: If ``source`` or ``target`` is outside ``previous``.
        AlgorithmError: If the predecessor chain contains a cycle.
    """
    n = len(previous)
    if not (is_vertex(n, source) and is_vertex(n, target)):
        raise InputError(f"source/target out of range [0, {n}).")
    if source == target:
        return [source]

    # Walk backwards from target to source
    chain: List[Vertex] = []
    cur: Optional[Vertex] = target
    while cur is not None:
        chain.append(cur)
        if cur == source:
            chain.reverse()
            return chain
        if len(chain) >= n:
            raise AlgorithmError(f"predecessor chain from {target} contains a cycle")
        cur = previous[cur]

    return Unreachable(source, target)


__all__ = ["PathResult", "Unreachable", "reconstruct_path"]
