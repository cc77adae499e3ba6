"""Lightweight structured logging for solver runs."""

from __future__ import annotations

import json
import math
import sys
from typing import Any, Dict, Protocol, TextIO

from .exceptions import ConfigError

LEVELS: Dict[str, int] = {"debug": 10, "info": 20, "warning": 30}


class Logger(Protocol):
    """Protocol for minimal logger implementations."""

    def debug(self, event: str, **fields: Any) -> None:
        """Emit a ``DEBUG``-level event."""
        ...

    def info(self, event: str, **fields: Any) -> None:
        """Emit an ``INFO``-level event."""
        ...

    def warning(self, event: str, **fields: Any) -> None:
        """Emit a ``WARNING``-level event."""
        ...


class NoopLogger:
    """Logger that discards all events."""

    def debug(self, event: str, **fields: Any) -> None:  # pragma: no cover - noop
        return

    def info(self, event: str, **fields: Any) -> None:  # pragma: no cover - noop
        return

    def warning(self, event: str, **fields: Any) -> None:  # pragma: no cover - noop
        return


def _jsonable(value: Any) -> Any:
    # json.dumps would emit the non-standard ``Infinity`` token
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return value


class StdLogger:
    """Logger writing one line per event, as ``key=value`` text or JSON.

    Args:
        level: Minimum level to emit (``"debug"``, ``"info"`` or ``"warning"``).
        json_fmt: Emit one JSON object per line instead of text.
        stream: Output stream, ``sys.stderr`` by default.
    """

    def __init__(
        self,
        level: str = "warning",
        json_fmt: bool = False,
        stream: TextIO | None = None,
    ) -> None:
        if level not in LEVELS:
            raise ConfigError(f"unknown log level '{level}'")
        self.level = level
        self.json_fmt = json_fmt
        self.stream = stream or sys.stderr

    def enabled(self, level: str) -> bool:
        """Return ``True`` if events at ``level`` are emitted."""
        return LEVELS[level] >= LEVELS[self.level]

    def log(self, level: str, event: str, **fields: Any) -> None:
        """Emit ``event`` at ``level`` with additional ``fields``."""
        if not self.enabled(level):
            return
        if self.json_fmt:
            obj: Dict[str, Any] = {"level": level, "event": event}
            obj.update({k: _jsonable(v) for k, v in fields.items()})
            self.stream.write(json.dumps(obj) + "\n")
        else:
            kv = " ".join(f"{k}={v}" for k, v in fields.items())
            self.stream.write(f"{level} {event} {kv}".rstrip() + "\n")

    def debug(self, event: str, **fields: Any) -> None:
        """Emit a ``DEBUG`` event."""
        self.log("debug", event, **fields)

    def info(self, event: str, **fields: Any) -> None:
        """Emit an ``INFO`` event."""
        self.log("info", event, **fields)

    def warning(self, event: str, **fields: Any) -> None:
        """Emit a ``WARNING`` event."""
        self.log("warning", event, **fields)


__all__ = ["LEVELS", "Logger", "NoopLogger", "StdLogger"]
