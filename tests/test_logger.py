"""Tests for the Logger, level gate, record assembly and sinks."""

import logging
import re
import traceback

import pytest

import pii_logger.logger as logger_module
from pii_logger import Level, LogEntry, Logger, create_logger
from pii_logger.sinks import LoggingSink, render

LINE_RE = re.compile(
    r"^\[\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z\] \[(\w+)\] \[([\w:]+)\] (.*)$"
)


# ── Record assembly ──────────────────────────────────────────────────

def test_info_emits_sanitized_line_and_context(sink):
    log = Logger("hr", sink=sink)
    log.info("Hello jo@x.com", {"ni": "AB123456C"})

    channel, line, context = sink.records[0]
    assert channel == "log"
    m = LINE_RE.match(line)
    assert m is not None
    assert m.groups() == ("INFO", "hr", "Hello ***@x.com")
    assert context == {"ni": "AB****C"}


def test_no_context_means_no_second_argument(sink):
    Logger("hr", sink=sink).info("plain")
    assert sink.records[0][2] is None


def test_module_cannot_be_overridden(sink):
    Logger("hr", sink=sink).info("x", {"module": "evil", "step": 1})
    entry = sink.entries[0]
    assert entry.context == {"module": "hr", "step": 1}
    assert sink.records[0][2] == {"step": 1}


def test_entries_are_always_sanitized(sink):
    Logger("hr", sink=sink).warn("x")
    assert sink.entries[0].sanitized is True
    with pytest.raises(TypeError):
        LogEntry("t", Level.INFO, "m", {}, sanitized=False)


@pytest.mark.parametrize("method,channel", [
    ("debug", "debug"), ("info", "log"), ("warn", "warn"), ("error", "error"),
])
def test_channel_routing(sink, method, channel):
    getattr(Logger("pos", sink=sink), method)("msg")
    assert sink.records[0][0] == channel
    assert f"[{channel.upper() if channel != 'log' else 'INFO'}]" in sink.records[0][1]


# ── Level gate ───────────────────────────────────────────────────────

def test_min_level_filters_lower_levels(sink):
    log = Logger("x", min_level="warn", sink=sink)
    log.debug("d", {"email": "jo@x.com"})
    log.info("i")
    assert len(sink) == 0
    log.warn("w")
    log.error("e")
    assert [LINE_RE.match(l).group(1) for l in sink.lines] == ["WARN", "ERROR"]


def test_filtered_calls_do_no_sanitizing(sink, monkeypatch):
    def boom(*args, **kwargs):
        raise AssertionError("sanitizer called for a filtered call")

    monkeypatch.setattr(logger_module, "sanitize", boom)
    monkeypatch.setattr(logger_module, "sanitize_context", boom)
    log = Logger("x", min_level=Level.ERROR, sink=sink)
    log.debug("jo@x.com", {"a": 1})
    log.warn("jo@x.com")
    assert len(sink) == 0


def test_disabled_logger_emits_nothing(sink):
    log = Logger("x", sink=sink)
    log.set_enabled(False)
    log.error("e", {}, ValueError("boom"))
    assert len(sink) == 0
    log.set_enabled(True)
    log.error("e")
    assert len(sink) == 1


def test_set_min_level_accepts_names(sink):
    log = Logger("x", sink=sink)
    log.set_min_level("WARNING")
    assert log.min_level is Level.WARN
    assert not log.is_enabled_for(Level.INFO)


# ── Errors ───────────────────────────────────────────────────────────

def _raise_with_pii():
    raise ValueError("bad email jo@x.com")


def test_error_merges_sanitized_message_and_name(sink):
    try:
        _raise_with_pii()
    except ValueError as exc:
        Logger("hmrc", sink=sink).error("submission failed", {"step": "rti"}, exc)

    assert sink.records[0][2] == {
        "step": "rti",
        "errorMessage": "bad email ***@x.com",
        "errorName": "ValueError",
    }


def test_error_never_includes_stack(sink):
    try:
        _raise_with_pii()
    except ValueError as exc:
        stack = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
        Logger("hmrc", sink=sink).error("failed", None, exc)

    emitted = repr(sink.records) + repr(sink.entries)
    assert "Traceback" not in emitted
    assert "_raise_with_pii" not in emitted
    assert stack not in emitted


# ── Child loggers ────────────────────────────────────────────────────

def test_child_extends_module_name(sink):
    parent = Logger("hr", sink=sink)
    child = parent.child("payroll")
    assert child.module_name == "hr:payroll"
    assert child.child("rti").module_name == "hr:payroll:rti"
    child.info("x")
    assert "[hr:payroll]" in sink.lines[0]


def test_child_settings_are_copied(sink):
    parent = Logger("hr", min_level="info", sink=sink)
    child = parent.child("payroll")
    parent.set_min_level("error")
    parent.set_enabled(False)
    assert child.min_level is Level.INFO
    assert child.enabled is True


# ── Construction ─────────────────────────────────────────────────────

def test_create_logger_options(sink):
    log = create_logger("pos", {"minLevel": "error", "enabled": False}, sink=sink)
    assert log.min_level is Level.ERROR
    assert log.enabled is False


def test_create_logger_env_defaults(monkeypatch):
    monkeypatch.setenv("PII_LOGGER_LEVEL", "warn")
    monkeypatch.setenv("PII_LOGGER_ENABLED", "off")
    log = create_logger("stock")
    assert log.min_level is Level.WARN
    assert log.enabled is False


@pytest.mark.parametrize("value,expected", [
    ("debug", Level.DEBUG), ("Warning", Level.WARN), (40, Level.ERROR), (Level.INFO, Level.INFO),
])
def test_level_parse(value, expected):
    assert Level.parse(value) is expected


@pytest.mark.parametrize("value", ["verbose", 35, True, None])
def test_level_parse_rejects(value):
    with pytest.raises(ValueError):
        Level.parse(value)


# ── Stdlib sink ──────────────────────────────────────────────────────

def test_logging_sink_routes_to_stdlib(caplog):
    caplog.set_level(logging.DEBUG, logger="pii_logger.test")
    log = Logger("hr", sink=LoggingSink("pii_logger.test"))
    log.warn("Card 4111 1111 1111 1111", {"email": "jo@x.com"})
    log.debug("plain")

    warn, debug = caplog.records
    assert warn.levelno == logging.WARNING
    assert "****1111" in warn.getMessage()
    assert "***@x.com" in warn.getMessage()
    assert warn.log_context == {"email": "***@x.com"}
    assert debug.levelno == logging.DEBUG
    assert debug.getMessage().endswith("[DEBUG] [hr] plain")


def test_render_format():
    entry = LogEntry("2026-01-05T09:12:44.120Z", Level.WARN, "Missing tax code",
                     {"module": "hr:payroll", "employee": "E1"})
    assert render(entry) == (
        "[2026-01-05T09:12:44.120Z] [WARN] [hr:payroll] Missing tax code",
        {"employee": "E1"},
    )
