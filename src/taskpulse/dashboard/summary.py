# src/taskpulse/dashboard/summary.py

from __future__ import annotations

"""
Dashboard summary.

Computes every figure the overview cards show from a single reference
instant, so overdue counts, percentages and the due-soon list never disagree
within one render pass.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from ..core.clock import resolve_now
from ..core.ports import Clock
from ..due.aggregate import OverdueBuckets, due_soon_tasks, overdue_by_priority, percent
from ..due.due_soon import DEFAULT_DAYS_AHEAD
from ..tasks.task_models import TaskStatus, task_field, task_id

logger = logging.getLogger(__name__)

_IN_PROGRESS = frozenset({TaskStatus.IN_PROGRESS, TaskStatus.IN_PROGRESS_LEGACY})


@dataclass(slots=True)
class DashboardSummary:
    generated_at: datetime
    days_ahead: int

    total: int = 0
    pending: int = 0
    in_progress: int = 0
    completed: int = 0
    completion_rate: int = 0

    overdue_count: int = 0
    overdue_percentage: int = 0
    overdue_by_priority: OverdueBuckets = field(default_factory=OverdueBuckets)
    due_soon: list[Any] = field(default_factory=list)

    def as_dict(self) -> dict[str, Any]:
        """JSON-friendly view; task records are reduced to their ids."""
        buckets = self.overdue_by_priority
        return {
            "generated_at": self.generated_at.isoformat(),
            "days_ahead": self.days_ahead,
            "total": self.total,
            "status": {
                "pending": self.pending,
                "in_progress": self.in_progress,
                "completed": self.completed,
            },
            "completion_rate": self.completion_rate,
            "overdue": {
                "count": self.overdue_count,
                "percentage": self.overdue_percentage,
                "by_priority": {
                    "high": [task_id(t) for t in buckets.high],
                    "medium": [task_id(t) for t in buckets.medium],
                    "low": [task_id(t) for t in buckets.low],
                    "total": buckets.total,
                },
            },
            "due_soon": [task_id(t) for t in self.due_soon],
        }


def build_summary(
    tasks: Any,
    *,
    clock: Clock | None = None,
    now: datetime | None = None,
    days_ahead: int = DEFAULT_DAYS_AHEAD,
) -> DashboardSummary:
    ref = resolve_now(now, clock)
    items = list(tasks) if isinstance(tasks, (list, tuple)) else []

    summary = DashboardSummary(generated_at=ref, days_ahead=days_ahead, total=len(items))

    for task in items:
        status = task_field(task, "status")
        if not isinstance(status, str):
            continue
        if status == TaskStatus.PENDING:
            summary.pending += 1
        elif status in _IN_PROGRESS:
            summary.in_progress += 1
        elif status == TaskStatus.COMPLETED:
            summary.completed += 1

    summary.completion_rate = percent(summary.completed, summary.total)

    buckets = overdue_by_priority(items, ref)
    summary.overdue_by_priority = buckets
    summary.overdue_count = buckets.total
    summary.overdue_percentage = percent(buckets.total, summary.total)
    summary.due_soon = due_soon_tasks(items, ref, days_ahead)

    logger.debug(
        "Summary at %s: total=%d overdue=%d due_soon=%d",
        ref.isoformat(),
        summary.total,
        summary.overdue_count,
        len(summary.due_soon),
    )
    return summary
