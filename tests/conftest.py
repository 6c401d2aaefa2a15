# tests/conftest.py

from __future__ import annotations

import time
from collections.abc import Callable, Iterator
from datetime import datetime
from typing import Any

import pytest

# All reference instants are local wall-clock time, the same way naive due
# strings are read, so the suite is independent of the machine's timezone.
NOW = datetime(2024, 6, 15, 10, 30).astimezone()


@pytest.fixture()
def now() -> datetime:
    return NOW


@pytest.fixture()
def local_tz(monkeypatch) -> Iterator[Callable[[str], None]]:
    """
    Switch the process-local timezone for one test.

    Everything "local" in taskpulse goes through datetime.astimezone(), which
    follows TZ after time.tzset().
    """
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset() is not available on this platform")

    def _use(name: str) -> None:
        monkeypatch.setenv("TZ", name)
        time.tzset()

    yield _use
    monkeypatch.undo()
    time.tzset()


@pytest.fixture()
def make_task() -> Callable[..., dict[str, Any]]:
    """
    Factory for dict-shaped task records, as the document store exports them.
    """
    counter = {"n": 0}

    def _make(**fields: Any) -> dict[str, Any]:
        counter["n"] += 1
        task: dict[str, Any] = {"id": f"t{counter['n']}", "status": "pending"}
        task.update(fields)
        return task

    return _make
