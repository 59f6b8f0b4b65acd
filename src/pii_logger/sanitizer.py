"""Recursive context sanitizer.

Walks a JSON-like context and returns a sanitized copy:

    sanitize_context({"password": "hunter2", "note": "call 07911123456"})
    # {"password": "[REDACTED]", "note": "call ***3456"}

Sensitive keys win over content.  Strings go through the pattern
registry, mappings and arrays are walked, numbers/booleans/None pass
through, and anything else is redacted.  The input is never mutated.
"""

from __future__ import annotations
from typing import Any, Mapping

from .keys import is_sensitive_key
from .masking import REDACTED
from .patterns import sanitize

# Deeper nesting (or a self-referencing structure) is redacted
MAX_DEPTH = 32

_PASSTHROUGH = (bool, int, float, type(None))


def sanitize_value(value: Any, _depth: int = 0, _seen: dict[int, Any] | None = None) -> Any:
    """Sanitize a single context value of any supported shape.

    A container referenced more than once is walked once per call.
    """
    if isinstance(value, str):
        return sanitize(value)
    if isinstance(value, _PASSTHROUGH):
        return value
    if _depth >= MAX_DEPTH:
        return REDACTED
    if _seen is None:
        _seen = {}
    if id(value) in _seen:
        return _seen[id(value)]
    if isinstance(value, Mapping):
        result: Any = _sanitize_mapping(value, _depth + 1, _seen)
    elif isinstance(value, (list, tuple)):
        items = [sanitize_value(item, _depth + 1, _seen) for item in value]
        result = items if isinstance(value, list) else tuple(items)
    else:
        return REDACTED
    _seen[id(value)] = result
    return result


def _sanitize_mapping(context: Mapping, depth: int, seen: dict[int, Any]) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for key, value in context.items():
        if is_sensitive_key(key):
            out[key] = REDACTED
        else:
            out[key] = sanitize_value(value, depth, seen)
    return out


def sanitize_context(context: Mapping[str, Any] | None) -> dict[str, Any]:
    """Return a sanitized copy of a log context.  ``None`` gives ``{}``."""
    if context is None:
        return {}
    if not isinstance(context, Mapping):
        return {"value": sanitize_value(context)}
    return _sanitize_mapping(context, 1, {})


def sanitize_object(obj: Any) -> Any:
    """Ad-hoc sanitizer for any value, without a Logger."""
    return sanitize_value(obj)
