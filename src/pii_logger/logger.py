"""Logger — the PII-safe logging API.

Usage:
    from pii_logger import create_logger

    log = create_logger("payroll", {"min_level": "info"})
    log.info("Submitted FPS", {"employee": "AB123456C", "email": "jo@x.com"})
    # [..] [INFO] [payroll] Submitted FPS {'employee': 'AB****C', 'email': '***@x.com'}

    rti = log.child("rti")           # module "payroll:rti"
    rti.error("HMRC rejected", {"ref": "123/AB45678"}, exc)

Calls below the logger's minimum level return before any sanitizing.
Everything that reaches the sink has been through the pattern registry
and the context sanitizer; exception tracebacks never do.
"""

from __future__ import annotations
from datetime import datetime, timezone
from typing import Any, Mapping

from .patterns import sanitize
from .sanitizer import sanitize_context
from .sinks import LoggingSink, Sink
from .types import Level, LogContext, LogEntry


def _utc_timestamp() -> str:
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class Logger:
    """A named logger that only ever emits sanitized entries."""

    __slots__ = ("_module_name", "_enabled", "_min_level", "_sink")

    def __init__(
        self,
        module_name: str,
        *,
        enabled: bool = True,
        min_level: Level | str | int = Level.DEBUG,
        sink: Sink | None = None,
    ) -> None:
        self._module_name = module_name
        self._enabled = bool(enabled)
        self._min_level = Level.parse(min_level)
        self._sink: Sink = sink if sink is not None else LoggingSink()

    # ------------------------------------------------------------------
    # Settings
    # ------------------------------------------------------------------

    @property
    def module_name(self) -> str:
        return self._module_name

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def min_level(self) -> Level:
        return self._min_level

    @property
    def sink(self) -> Sink:
        return self._sink

    def set_enabled(self, enabled: bool) -> None:
        self._enabled = bool(enabled)

    def set_min_level(self, level: Level | str | int) -> None:
        self._min_level = Level.parse(level)

    def is_enabled_for(self, level: Level) -> bool:
        """Level gate: checked before any sanitizing work."""
        return self._enabled and level >= self._min_level

    # ------------------------------------------------------------------
    # Log calls
    # ------------------------------------------------------------------

    def debug(self, message: str, context: LogContext | None = None) -> None:
        self._log(Level.DEBUG, message, context)

    def info(self, message: str, context: LogContext | None = None) -> None:
        self._log(Level.INFO, message, context)

    def warn(self, message: str, context: LogContext | None = None) -> None:
        self._log(Level.WARN, message, context)

    def error(
        self,
        message: str,
        context: LogContext | None = None,
        error: BaseException | None = None,
    ) -> None:
        """Log at error level.

        When ``error`` is given its message and class name are added to the
        context.  The traceback is never read.
        """
        if not self.is_enabled_for(Level.ERROR):
            return
        if error is not None:
            context = {
                **(context or {}),
                "errorMessage": str(error),
                "errorName": type(error).__name__,
            }
        self._emit(Level.ERROR, message, context)

    def child(self, name: str) -> Logger:
        """New logger named ``<parent>:<name>`` with a copy of the settings."""
        return Logger(
            f"{self._module_name}:{name}",
            enabled=self._enabled,
            min_level=self._min_level,
            sink=self._sink,
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _log(self, level: Level, message: str, context: LogContext | None) -> None:
        if not self.is_enabled_for(level):
            return
        self._emit(level, message, context)

    def _emit(self, level: Level, message: str, context: LogContext | None) -> None:
        self._sink(self._build_entry(level, message, context))

    def _build_entry(
        self, level: Level, message: str, context: LogContext | None,
    ) -> LogEntry:
        record_context: dict[str, Any] = {"module": self._module_name}
        for key, value in sanitize_context(context).items():
            if key != "module":
                record_context[key] = value
        return LogEntry(
            timestamp=_utc_timestamp(),
            level=level,
            message=sanitize(message),
            context=record_context,
        )

    def __repr__(self) -> str:
        state = "enabled" if self._enabled else "disabled"
        return f"<Logger {self._module_name!r} {self._min_level.label} {state}>"


def create_logger(
    module_name: str,
    options: Mapping[str, Any] | None = None,
    *,
    sink: Sink | None = None,
) -> Logger:
    """Create a logger for a module.

    ``options`` may set ``enabled`` and ``min_level`` (``minLevel`` is
    accepted too); anything missing comes from the environment defaults.
    """
    from .config import env_defaults

    defaults = env_defaults()
    options = options or {}
    min_level = options.get("min_level", options.get("minLevel", defaults["min_level"]))
    return Logger(
        module_name,
        enabled=options.get("enabled", defaults["enabled"]),
        min_level=min_level,
        sink=sink,
    )
