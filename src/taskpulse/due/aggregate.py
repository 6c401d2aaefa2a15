# src/taskpulse/due/aggregate.py

from __future__ import annotations

"""
Collection-level views over task records.

Every entry point:
- accepts anything; non-list input yields an empty result instead of failing,
- resolves the reference instant once and classifies every record against it,
- preserves input order in the lists it returns.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from ..core.clock import resolve_now
from ..tasks.task_models import TaskPriority, task_field
from .due_soon import DEFAULT_DAYS_AHEAD, is_due_soon
from .overdue import is_overdue


@dataclass(slots=True)
class OverdueBuckets:
    """
    Overdue tasks split by priority.

    `total` counts every overdue task, including those whose priority is
    missing or unknown, so the three buckets may sum to less than `total`.
    """

    high: list[Any] = field(default_factory=list)
    medium: list[Any] = field(default_factory=list)
    low: list[Any] = field(default_factory=list)
    total: int = 0

    def as_dict(self) -> dict[str, Any]:
        return {"high": list(self.high), "medium": list(self.medium), "low": list(self.low), "total": self.total}


def _as_task_list(tasks: Any) -> list[Any]:
    if isinstance(tasks, (list, tuple)):
        return list(tasks)
    return []


def percent(part: int, total: int) -> int:
    """Whole-number percentage, halves rounded up; 0 for an empty total."""
    if total <= 0:
        return 0
    return int(part * 100 / total + 0.5)


def overdue_tasks(tasks: Any, now: datetime | None = None) -> list[Any]:
    items = _as_task_list(tasks)
    if not items:
        return []
    ref = resolve_now(now)
    return [t for t in items if is_overdue(t, ref)]


def overdue_count(tasks: Any, now: datetime | None = None) -> int:
    return len(overdue_tasks(tasks, now))


def due_soon_tasks(tasks: Any, now: datetime | None = None, days_ahead: int = DEFAULT_DAYS_AHEAD) -> list[Any]:
    items = _as_task_list(tasks)
    if not items:
        return []
    ref = resolve_now(now)
    return [t for t in items if is_due_soon(t, ref, days_ahead)]


def overdue_percentage(tasks: Any, now: datetime | None = None) -> int:
    items = _as_task_list(tasks)
    return percent(overdue_count(items, now), len(items))


def overdue_by_priority(tasks: Any, now: datetime | None = None) -> OverdueBuckets:
    overdue = overdue_tasks(tasks, now)
    buckets = OverdueBuckets(total=len(overdue))
    for task in overdue:
        priority = task_field(task, "priority")
        if not isinstance(priority, str):
            continue
        if priority == TaskPriority.HIGH:
            buckets.high.append(task)
        elif priority == TaskPriority.MEDIUM:
            buckets.medium.append(task)
        elif priority == TaskPriority.LOW:
            buckets.low.append(task)
    return buckets
