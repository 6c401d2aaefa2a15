# src/taskpulse/tasks/task_models.py

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from typing import Any


class TaskStatus(StrEnum):
    """
    Task lifecycle status as written by the dashboard.

    Notes:
    - The store accepts any string here; only COMPLETED and CANCELLED carry
      meaning for due-date classification (terminal states).
    - Both "in-progress" and "in_progress" appear in stored records.
    """

    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    IN_PROGRESS_LEGACY = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class TaskPriority(StrEnum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


TERMINAL_STATUSES = frozenset({TaskStatus.COMPLETED, TaskStatus.CANCELLED})

_MISSING = object()


def task_field(task: Any, name: str, default: Any = None) -> Any:
    """
    Read a field from a task record without touching it.

    Records arrive either as plain mappings (store exports, JSON) or as
    objects with attributes (view models). Lookup errors become `default`.
    """
    if task is None:
        return default
    if isinstance(task, Mapping):
        try:
            value = task.get(name, _MISSING)
        except Exception:
            return default
    else:
        try:
            value = getattr(task, name, _MISSING)
        except Exception:
            return default
    return default if value is _MISSING else value


def is_terminal(task: Any) -> bool:
    status = task_field(task, "status")
    return isinstance(status, str) and status in TERMINAL_STATUSES


def progress_completed(task: Any) -> bool:
    progress = task_field(task, "progress_status")
    return isinstance(progress, str) and progress == TaskStatus.COMPLETED


def raw_due_value(task: Any) -> Any:
    """
    Return the raw due value: `due_date` when set, else `dueDate`.

    Both spellings exist in stored records. None and blank strings count as
    absent.
    """
    for name in ("due_date", "dueDate"):
        raw = task_field(task, name)
        if raw is None or (isinstance(raw, str) and not raw.strip()):
            continue
        return raw
    return None


def task_id(task: Any) -> Any:
    return task_field(task, "id")
