# tests/conftest.py — v2
"""Shared test fixtures for all unit and integration tests.

Provides temp log paths, a deterministic clock and an archive factory.
No external dependencies — all I/O happens under tmp_path.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Callable

import pytest

from lumberjack.logging.context import clear_context
from lumberjack.rotation.archive_namer import archive_name


class StepClock:
    """Clock advancing by a fixed step on every call."""

    def __init__(self, start: datetime, step: timedelta = timedelta(seconds=1)) -> None:
        self.now = start
        self.step = step
        self.calls = 0

    def __call__(self) -> datetime:
        current = self.now
        self.now += self.step
        self.calls += 1
        return current


# === FIXTURES: Paths ===


@pytest.fixture
def log_dir(tmp_path: Path) -> Path:
    """Directory for the live log (not created: the writer must create it)."""
    return tmp_path / "logs"


@pytest.fixture
def log_path(log_dir: Path) -> Path:
    """Live log file path."""
    return log_dir / "app.log"


# === FIXTURES: Time ===


@pytest.fixture
def t0() -> datetime:
    return datetime(2026, 2, 7, 14, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def clock(t0: datetime) -> StepClock:
    """Clock yielding t0, t0+1s, t0+2s, ..."""
    return StepClock(t0)


# === FIXTURES: Archives ===


@pytest.fixture
def make_archive(log_path: Path) -> Callable[[datetime, bytes], Path]:
    """Create an archive of log_path stamped with the given time."""

    def _make(ts: datetime, content: bytes = b"old\n") -> Path:
        path = archive_name(log_path, ts)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)
        return path

    return _make


@pytest.fixture(autouse=True)
def _reset_log_context():
    clear_context()
    yield
    clear_context()
