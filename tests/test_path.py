"""Tests for predecessor-chain path reconstruction."""

from __future__ import annotations

import pytest

from dijkstrax.exceptions import AlgorithmError, InputError
from dijkstrax.path import Unreachable, reconstruct_path


def test_follows_predecessors_back_to_source() -> None:
    assert reconstruct_path([None, 0, 1, 1], 0, 2) == [0, 1, 2]
    assert reconstruct_path([None, 0, 1, 1], 0, 3) == [0, 1, 3]


def test_source_to_itself() -> None:
    assert reconstruct_path([None, None], 1, 1) == [1]


def test_non_zero_source() -> None:
    previous = [2, None, None, 0]
    assert reconstruct_path(previous, 2, 3) == [2, 0, 3]


def test_unreachable_target_is_reported_not_raised() -> None:
    result = reconstruct_path([None, 0, None], 0, 2)
    assert result == Unreachable(0, 2)
    assert not result
    assert "unreachable" in str(result)


def test_chain_that_misses_source_is_unreachable() -> None:
    # 2 -> 1 -> root 1 has no predecessor and is not the source
    assert isinstance(reconstruct_path([None, None, 1], 0, 2), Unreachable)


@pytest.mark.parametrize("source,target", [(-1, 0), (0, 3), (3, 0)])
def test_out_of_range_vertices_raise(source, target) -> None:
    with pytest.raises(InputError):
        reconstruct_path([None, 0, 1], source, target)


def test_cyclic_predecessors_raise() -> None:
    with pytest.raises(AlgorithmError):
        reconstruct_path([None, 2, 1], 0, 1)
