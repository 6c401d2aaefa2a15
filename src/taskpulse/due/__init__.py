"""
Due-date classification engine.

Components:
- dates.py: raw due value -> aware local datetime (or None)
- overdue.py: is_overdue(task, now)
- due_soon.py: is_due_soon(task, now, days_ahead)
- aggregate.py: lists, counts, percentage and priority buckets over a collection
"""

from .aggregate import (
    OverdueBuckets,
    due_soon_tasks,
    overdue_by_priority,
    overdue_count,
    overdue_percentage,
    overdue_tasks,
)
from .dates import DueValueShape, classify_due_value, end_of_day, normalize_due_date
from .due_soon import DEFAULT_DAYS_AHEAD, is_due_soon
from .overdue import is_overdue

__all__ = [
    "DEFAULT_DAYS_AHEAD",
    "DueValueShape",
    "OverdueBuckets",
    "classify_due_value",
    "due_soon_tasks",
    "end_of_day",
    "is_due_soon",
    "is_overdue",
    "normalize_due_date",
    "overdue_by_priority",
    "overdue_count",
    "overdue_percentage",
    "overdue_tasks",
]
