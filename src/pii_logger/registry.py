"""Module logger registry — one shared logger per business domain."""

from __future__ import annotations
import threading

from .logger import Logger, create_logger

DOMAIN_MODULES: tuple[str, ...] = (
    "hr", "payroll", "hmrc", "pos", "bookings",
    "finance", "stock", "company", "auth", "gdpr",
)

_loggers: dict[str, Logger] = {}
_lock = threading.Lock()


def get_logger(name: str) -> Logger:
    """Return the logger for ``name``, creating it on first use."""
    with _lock:
        logger = _loggers.get(name)
        if logger is None:
            logger = _loggers[name] = create_logger(name)
        return logger


def domain_loggers() -> dict[str, Logger]:
    return {name: get_logger(name) for name in DOMAIN_MODULES}


def reset_registry() -> None:
    with _lock:
        _loggers.clear()
