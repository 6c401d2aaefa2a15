# src/taskpulse/cli/main.py

"""
CLI entrypoint.

Initializes logging from settings, loads a JSON export of task records,
captures one reference instant and prints the dashboard summary for it.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Any

from ..config import get_settings
from ..core.clock import FixedClock, SystemClock
from ..core.ports import Clock
from ..dashboard.summary import DashboardSummary, build_summary
from ..logging_setup import setup_logging
from ..tasks.task_models import task_field, task_id

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_BAD_INPUT = 2


class TaskFileError(ValueError):
    """The task export could not be read or has the wrong structure."""


def load_tasks(path: str | Path) -> list[Any]:
    """
    Read task records from a JSON file.

    Accepts either a top-level list of records or an object with a "tasks" list.
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text("utf-8"))
    except OSError as e:
        raise TaskFileError(f"cannot read {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise TaskFileError(f"{path} is not valid JSON: {e}") from e

    if isinstance(data, dict):
        data = data.get("tasks")
    if not isinstance(data, list):
        raise TaskFileError(f"{path} must contain a list of tasks or an object with a 'tasks' list")
    return data


def _parse_now(raw: str) -> datetime:
    text = raw.strip()
    if text[-1:] in ("Z", "z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid ISO date/time: {raw!r}") from e


def _label(task: Any) -> str:
    title = task_field(task, "title")
    ident = task_id(task)
    if isinstance(title, str) and title.strip():
        return f"{ident}: {title.strip()}" if ident is not None else title.strip()
    return str(ident) if ident is not None else "<no id>"


def render_text(summary: DashboardSummary) -> str:
    buckets = summary.overdue_by_priority
    lines = [
        f"Snapshot: {summary.generated_at.strftime('%Y-%m-%d %H:%M:%S')}",
        f"Tasks: {summary.total} "
        f"(pending {summary.pending}, in progress {summary.in_progress}, completed {summary.completed})",
        f"Completion rate: {summary.completion_rate}%",
        f"Overdue: {summary.overdue_count} ({summary.overdue_percentage}%) "
        f"- high {len(buckets.high)}, medium {len(buckets.medium)}, low {len(buckets.low)}",
        f"Due in the next {summary.days_ahead} days: {len(summary.due_soon)}",
    ]
    for task in summary.due_soon:
        lines.append(f"  - {_label(task)}")
    return "\n".join(lines)


def build_parser(default_days: int) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="taskpulse-report",
        description="Summarize overdue and due-soon tasks from a JSON task export.",
    )
    parser.add_argument("path", help="JSON file: a list of tasks or {\"tasks\": [...]}")
    parser.add_argument(
        "--days-ahead",
        type=int,
        default=default_days,
        help=f"due-soon window in days (default: {default_days})",
    )
    parser.add_argument("--now", type=_parse_now, default=None, help="reference instant (ISO-8601)")
    parser.add_argument("--json", action="store_true", help="print the summary as JSON")
    return parser


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()

    console_level = getattr(logging, settings.log_level, logging.INFO)
    if not isinstance(console_level, int):
        console_level = logging.INFO
    setup_logging(
        log_dir=settings.log_dir,
        console_level=console_level,
        file_logging=settings.file_logging,
    )

    args = build_parser(settings.due_soon_days).parse_args(argv)
    if args.days_ahead < 0:
        logger.error("--days-ahead must be >= 0 (got %d)", args.days_ahead)
        return EXIT_BAD_INPUT

    logger.info("Starting %s report for %s", settings.app_name, args.path)

    try:
        tasks = load_tasks(args.path)
    except TaskFileError as e:
        logger.error("%s", e)
        return EXIT_BAD_INPUT

    clock: Clock = FixedClock(args.now) if args.now is not None else SystemClock()
    summary = build_summary(tasks, clock=clock, days_ahead=args.days_ahead)

    if args.json:
        print(json.dumps(summary.as_dict(), ensure_ascii=False, indent=2, default=str))
    else:
        print(render_text(summary))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
