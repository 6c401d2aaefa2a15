# src/taskpulse/due/due_soon.py

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Any

from ..core.clock import resolve_now
from ..tasks.task_models import is_terminal, raw_due_value
from .dates import end_of_local_day, normalize_due_date

DEFAULT_DAYS_AHEAD = 3


def due_soon_window(now: datetime, days_ahead: int = DEFAULT_DAYS_AHEAD) -> tuple[datetime, datetime]:
    """
    Inclusive window [now, end of day `days_ahead` days later].

    The lower bound is the exact reference instant (no grace), so anything
    already past is excluded even if it is due later today.
    """
    start = resolve_now(now)
    # Day arithmetic on the wall-clock date, so DST shifts do not move the bound.
    return start, end_of_local_day(start.date() + timedelta(days=days_ahead))


def is_due_soon(task: Any, now: datetime | None = None, days_ahead: int = DEFAULT_DAYS_AHEAD) -> bool:
    # progress_status is not consulted here, unlike is_overdue().
    if task is None or is_terminal(task):
        return False

    raw = raw_due_value(task)
    if raw is None:
        return False

    due = normalize_due_date(raw)
    if due is None:
        return False

    try:
        start, upper = due_soon_window(resolve_now(now), days_ahead)
    except (TypeError, OverflowError):
        return False
    return start <= due <= upper
