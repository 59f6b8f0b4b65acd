"""YAML/dict config loader for pii-logger.

Supports loading from a YAML file or a plain dict (for embedding in a
larger application config).

Example YAML:

    pii_logger:
      enabled: true
      min_level: info
      sink: logging            # "logging" or "memory"
      logger_name: app.pii     # stdlib logger used by the logging sink
      modules:
        payroll:
          min_level: debug
        bookings:
          enabled: false

Environment defaults (read at call time):
    PII_LOGGER_ENABLED   0/false/no/off disables every logger
    PII_LOGGER_LEVEL     minimum level, default "debug"
"""

from __future__ import annotations
import os
from pathlib import Path
from typing import Any

from .logger import Logger
from .sinks import LoggingSink, RecordingSink, Sink
from .types import Level

_FALSEY = {"0", "false", "no", "off"}
_SINKS = ("logging", "memory")


def env_defaults() -> dict[str, Any]:
    """Defaults for loggers created without explicit options."""
    enabled = os.environ.get("PII_LOGGER_ENABLED", "1").strip().lower() not in _FALSEY
    level = Level.parse(os.environ.get("PII_LOGGER_LEVEL", "debug"))
    return {"enabled": enabled, "min_level": level}


def load_config(data: dict[str, Any]) -> dict[str, Any]:
    """Normalize a config dict (from YAML or inline).  Idempotent."""
    # Support nested under "pii_logger" key or flat
    if "pii_logger" in data:
        data = data["pii_logger"] or {}

    defaults = env_defaults()
    sink = data.get("sink", "logging")
    if sink not in _SINKS:
        raise ValueError(f"unknown sink {sink!r}, expected one of {_SINKS}")

    modules: dict[str, dict[str, Any]] = {}
    for name, overrides in (data.get("modules") or {}).items():
        overrides = overrides or {}
        entry: dict[str, Any] = {}
        if "enabled" in overrides:
            entry["enabled"] = bool(overrides["enabled"])
        if "min_level" in overrides:
            entry["min_level"] = Level.parse(overrides["min_level"])
        modules[name] = entry

    return {
        "enabled": bool(data.get("enabled", defaults["enabled"])),
        "min_level": Level.parse(data.get("min_level", defaults["min_level"])),
        "sink": sink,
        "logger_name": data.get("logger_name", "pii_logger"),
        "modules": modules,
    }


def load_from_yaml(path: str | Path) -> dict[str, Any]:
    """Load config from a YAML file."""
    import yaml
    with open(path) as f:
        return load_config(yaml.safe_load(f) or {})


def build_sink(config: dict[str, Any]) -> Sink:
    if config["sink"] == "memory":
        return RecordingSink()
    return LoggingSink(config["logger_name"])


def create_logger_from_config(
    config: dict[str, Any],
    module_name: str,
    *,
    sink: Sink | None = None,
) -> Logger:
    """Create a logger for ``module_name`` from a config dict."""
    cfg = load_config(config)

    # Top-level module name picks up per-module overrides ("payroll:rti" → "payroll")
    modules = cfg["modules"]
    if module_name in modules:
        overrides = modules[module_name]
    else:
        overrides = modules.get(module_name.split(":", 1)[0], {})
    return Logger(
        module_name,
        enabled=overrides.get("enabled", cfg["enabled"]),
        min_level=overrides.get("min_level", cfg["min_level"]),
        sink=sink if sink is not None else build_sink(cfg),
    )
