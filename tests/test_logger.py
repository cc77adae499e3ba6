"""Tests for the structured logger."""

from __future__ import annotations

import io
import json
import math

import pytest

from dijkstrax.exceptions import ConfigError
from dijkstrax.logger import NoopLogger, StdLogger


def test_text_lines_respect_level() -> None:
    stream = io.StringIO()
    log = StdLogger(level="info", stream=stream)
    log.debug("hidden", a=1)
    log.info("shown", a=1, b="x")
    log.warning("bare")
    assert stream.getvalue().splitlines() == ["info shown a=1 b=x", "warning bare"]


def test_json_lines_replace_infinite_values() -> None:
    stream = io.StringIO()
    log = StdLogger(level="debug", json_fmt=True, stream=stream)
    log.debug("finalize", vertex=3, distance=math.inf)
    assert json.loads(stream.getvalue()) == {
        "level": "debug",
        "event": "finalize",
        "vertex": 3,
        "distance": None,
    }


def test_unknown_level_is_rejected() -> None:
    with pytest.raises(ConfigError):
        StdLogger(level="trace")


def test_noop_logger_accepts_events() -> None:
    log = NoopLogger()
    log.debug("x", a=1)
    log.info("x")
    log.warning("x")
