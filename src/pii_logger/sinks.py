"""Emission sinks — where sanitized entries go.

A sink is any callable that takes a :class:`LogEntry`.  Entries reaching a
sink are already sanitized; sinks only format and route them.

    [2026-01-05T09:12:44.120Z] [WARN] [hr:payroll] Missing tax code
"""

from __future__ import annotations
import logging
from typing import Any, Protocol

from .types import Level, LogEntry


class Sink(Protocol):
    def __call__(self, entry: LogEntry) -> None: ...


def render(entry: LogEntry) -> tuple[str, dict[str, Any] | None]:
    """Format the line and the structured context for an entry.

    The context is ``None`` when nothing but ``module`` is present.
    """
    line = (
        f"[{entry.timestamp}] [{entry.level.name}] "
        f"[{entry.module}] {entry.message}"
    )
    extra = entry.extra
    return line, (extra or None)


class LoggingSink:
    """Route entries to a stdlib logger, one channel per level."""

    __slots__ = ("_logger",)

    def __init__(self, name: str = "pii_logger") -> None:
        self._logger = logging.getLogger(name)

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def __call__(self, entry: LogEntry) -> None:
        channel = {
            Level.ERROR: self._logger.error,
            Level.WARN: self._logger.warning,
            Level.DEBUG: self._logger.debug,
        }.get(entry.level, self._logger.info)

        line, extra = render(entry)
        if extra is None:
            channel("%s", line)
        else:
            channel("%s %s", line, extra, extra={"log_context": extra})


class RecordingSink:
    """Keep rendered entries in memory as ``(channel, line, context)``."""

    __slots__ = ("records", "entries")

    def __init__(self) -> None:
        self.records: list[tuple[str, str, dict[str, Any] | None]] = []
        self.entries: list[LogEntry] = []

    def __call__(self, entry: LogEntry) -> None:
        line, extra = render(entry)
        channel = entry.level.label if entry.level != Level.INFO else "log"
        self.records.append((channel, line, extra))
        self.entries.append(entry)

    @property
    def lines(self) -> list[str]:
        return [line for _, line, _ in self.records]

    def clear(self) -> None:
        self.records.clear()
        self.entries.clear()

    def __len__(self) -> int:
        return len(self.records)
