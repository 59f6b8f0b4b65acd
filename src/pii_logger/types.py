"""Core types."""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any, Mapping, Sequence, Union


class Category(str, Enum):
    """Personal-data categories, declared in detection order."""
    NI_NUMBER = "NI_NUMBER"
    PAYE_REFERENCE = "PAYE_REFERENCE"
    EMAIL = "EMAIL"
    PHONE = "PHONE"
    POSTCODE = "POSTCODE"
    CARD_NUMBER = "CARD_NUMBER"
    SORT_CODE = "SORT_CODE"
    BANK_ACCOUNT = "BANK_ACCOUNT"
    DATE_OF_BIRTH = "DATE_OF_BIRTH"
    IP_ADDRESS = "IP_ADDRESS"
    UTR = "UTR"
    VAT_NUMBER = "VAT_NUMBER"
    ACCESS_TOKEN = "ACCESS_TOKEN"
    GENERIC_TOKEN = "GENERIC_TOKEN"


class Level(IntEnum):
    """Log severity. Values line up with the stdlib ``logging`` levels."""
    DEBUG = 10
    INFO = 20
    WARN = 30
    ERROR = 40

    @property
    def label(self) -> str:
        return self.name.lower()

    @classmethod
    def parse(cls, value: Level | str | int) -> Level:
        """Accept a Level, a name ("warn", "WARNING", ...) or a numeric level."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            name = value.strip().upper()
            if name == "WARNING":
                name = "WARN"
            try:
                return cls[name]
            except KeyError:
                raise ValueError(f"unknown log level: {value!r}") from None
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError:
                raise ValueError(f"unknown log level: {value!r}") from None
        raise ValueError(f"unknown log level: {value!r}")


# Context values: JSON-like, arrays included.
ContextValue = Union[
    str, int, float, bool, None,
    Mapping[str, "ContextValue"],
    Sequence["ContextValue"],
]
LogContext = Mapping[str, ContextValue]


@dataclass(frozen=True, slots=True)
class LogEntry:
    """A fully sanitized record, ready for a sink."""
    timestamp: str                 # ISO-8601, UTC
    level: Level
    message: str
    context: dict[str, Any] = field(default_factory=dict)
    sanitized: bool = field(default=True, init=False)

    @property
    def module(self) -> str:
        return self.context.get("module", "")

    @property
    def extra(self) -> dict[str, Any]:
        """Context without the injected ``module`` field."""
        return {k: v for k, v in self.context.items() if k != "module"}
