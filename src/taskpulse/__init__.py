"""taskpulse: due-date classification for team task dashboards."""

from .core.clock import FixedClock, SystemClock, resolve_now
from .dashboard.summary import DashboardSummary, build_summary
from .due import (
    DEFAULT_DAYS_AHEAD,
    OverdueBuckets,
    due_soon_tasks,
    is_due_soon,
    is_overdue,
    normalize_due_date,
    overdue_by_priority,
    overdue_count,
    overdue_percentage,
    overdue_tasks,
)

__all__ = [
    "DEFAULT_DAYS_AHEAD",
    "DashboardSummary",
    "FixedClock",
    "OverdueBuckets",
    "SystemClock",
    "build_summary",
    "due_soon_tasks",
    "is_due_soon",
    "is_overdue",
    "normalize_due_date",
    "overdue_by_priority",
    "overdue_count",
    "overdue_percentage",
    "overdue_tasks",
    "resolve_now",
]
