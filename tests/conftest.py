"""Pytest configuration for log_defer tests."""

import sys
from pathlib import Path

import pytest


def ensure_package_on_path() -> None:
    root = Path(__file__).resolve().parents[1]
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))

ensure_package_on_path()

from log_defer.config import get_settings  # noqa: E402

START = 1000.0


class ScriptedClock:
    """Clock returning ``START`` plus whatever offset a test sets."""

    def __init__(self, start: float = START) -> None:
        self.start = start
        self.offset = 0.0

    def advance_to(self, offset: float) -> None:
        self.offset = offset

    def __call__(self) -> float:
        return self.start + self.offset


@pytest.fixture
def clock() -> ScriptedClock:
    return ScriptedClock()


@pytest.fixture(autouse=True)
def default_settings(monkeypatch):
    """Keep environment overrides out of the default threshold."""

    for name in ("LOG_DEFER_LEVEL", "LOG_DEFER_LOGGER_NAME", "LOG_DEFER_ENSURE_ASCII"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class Collector:
    """Callback recording every record handed to it."""

    def __init__(self) -> None:
        self.records = []

    def __call__(self, record) -> None:
        self.records.append(record)


@pytest.fixture
def collector() -> Collector:
    return Collector()
