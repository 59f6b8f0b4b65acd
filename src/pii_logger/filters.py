"""Stdlib bridge — sanitize records logged through ``logging`` directly.

    import logging
    from pii_logger.filters import install

    install()                                # every root handler
    logging.getLogger("requests").warning("retry for jo@x.com")
    # retry for ***@x.com

Tracebacks are dropped from filtered records; handlers print the message
only.
"""

from __future__ import annotations
import logging

from .patterns import sanitize


class SanitizingFilter(logging.Filter):
    """Logging filter that masks personal data and strips tracebacks."""

    def filter(self, record: logging.LogRecord) -> bool:
        try:
            message = record.getMessage()
        except (TypeError, ValueError):
            # Mismatched format args: log the raw template instead
            message = str(record.msg)
        record.msg = sanitize(message)
        record.args = ()
        record.exc_info = None
        record.exc_text = None
        record.stack_info = None
        return True


def install(logger: logging.Logger | None = None) -> SanitizingFilter:
    """Attach a SanitizingFilter to every handler of ``logger`` (root by default)."""
    logger = logger or logging.getLogger()
    flt = SanitizingFilter()
    for handler in logger.handlers:
        if not any(isinstance(f, SanitizingFilter) for f in handler.filters):
            handler.addFilter(flt)
    return flt
