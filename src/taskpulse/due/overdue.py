# src/taskpulse/due/overdue.py

from __future__ import annotations

from datetime import datetime
from typing import Any

from ..core.clock import resolve_now
from ..tasks.task_models import is_terminal, progress_completed, raw_due_value
from .dates import end_of_day, normalize_due_date


def is_overdue(task: Any, now: datetime | None = None) -> bool:
    """
    True once the whole local calendar day of the due instant has elapsed.

    A task due today is not overdue until the day has fully elapsed.
    Terminal tasks (completed/cancelled status, or completed progress) are
    never overdue. A missing or unreadable due date means "not overdue".
    """
    if task is None or is_terminal(task) or progress_completed(task):
        return False

    raw = raw_due_value(task)
    if raw is None:
        return False

    due = normalize_due_date(raw)
    if due is None:
        return False

    return end_of_day(due) < resolve_now(now)
