import logging
from datetime import datetime, timedelta, UTC

import pytest

from memshortener.constants import ENV
from memshortener.dao import ShortURLMemoryDAO
from memshortener.utils import ShortenerConfig


class FrozenClock:
    """Manually advanced stand-in for datetime.now(UTC)."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now += delta


@pytest.fixture(autouse=True)
def _env(monkeypatch):
    """Start every test from a clean shortener environment."""
    for name in (*ENV.App, *ENV.Shortener):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def clock() -> FrozenClock:
    return FrozenClock(datetime(2025, 10, 15, 12, 0, 0, tzinfo=UTC))


@pytest.fixture
def dao(clock) -> ShortURLMemoryDAO:
    return ShortURLMemoryDAO(clock=clock)


@pytest.fixture
def config() -> ShortenerConfig:
    return ShortenerConfig(
        base_url='http://short.url/',
        shortcode_length=6,
        ttl=timedelta(hours=24),
        sweep_interval=timedelta(milliseconds=10),
        max_workers=8,
    )


@pytest.fixture
def restore_logging():
    """Undo initialize_logging() so pytest's own log capturing keeps working."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
