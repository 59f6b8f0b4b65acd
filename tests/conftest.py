import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

import pytest

from pii_logger.sinks import RecordingSink


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("PII_LOGGER_ENABLED", raising=False)
    monkeypatch.delenv("PII_LOGGER_LEVEL", raising=False)
