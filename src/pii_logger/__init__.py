"""PII Logger — structured logging that never emits raw UK personal data."""

from .logger import Logger, create_logger
from .patterns import DetectionRule, RULES, sanitize, scan
from .sanitizer import sanitize_context, sanitize_object
from .keys import is_sensitive_key
from .masking import REDACTED, REDACTED_TOKEN, mask_value
from .sinks import LoggingSink, RecordingSink, Sink, render
from .filters import SanitizingFilter
from .config import create_logger_from_config, load_config, load_from_yaml
from .registry import get_logger
from .types import Category, Level, LogContext, LogEntry

__all__ = [
    "Logger", "create_logger",
    "DetectionRule", "RULES", "sanitize", "scan",
    "sanitize_context", "sanitize_object",
    "is_sensitive_key",
    "REDACTED", "REDACTED_TOKEN", "mask_value",
    "LoggingSink", "RecordingSink", "Sink", "render",
    "SanitizingFilter",
    "create_logger_from_config", "load_config", "load_from_yaml",
    "get_logger",
    "Category", "Level", "LogContext", "LogEntry",
]
__version__ = "0.1.0"
