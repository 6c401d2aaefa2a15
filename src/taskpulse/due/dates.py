# src/taskpulse/due/dates.py

from __future__ import annotations

"""
Due-date normalization.

Stored due values come in several encodings:
- ISO-8601 text ("2024-01-01", "2024-01-01T09:30:00Z"),
- store timestamp records with an integer `seconds` field,
- store timestamp objects with a conversion hook (to_datetime / toDate / to_date),
- anything else (datetime, date, epoch milliseconds).

normalize_due_date() classifies the raw value first, then dispatches on that
shape. The result is an aware local datetime, or None when the value cannot be
turned into a real instant. It never raises.
"""

import logging
from collections.abc import Callable, Mapping
from datetime import date, datetime, time, timedelta, timezone
from enum import StrEnum
from typing import Any

logger = logging.getLogger(__name__)

CONVERSION_HOOKS = ("to_datetime", "toDate", "to_date")


class DueValueShape(StrEnum):
    TEXT = "text"
    EPOCH_SECONDS = "epoch_seconds"
    CONVERTIBLE = "convertible"
    OTHER = "other"


def _seconds_field(raw: Any) -> int | None:
    if isinstance(raw, timedelta):
        return None
    try:
        if isinstance(raw, Mapping):
            value = raw.get("seconds")
        else:
            value = getattr(raw, "seconds", None)
    except Exception:
        return None
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return None


def _conversion_hook(raw: Any) -> Callable[[], Any] | None:
    for name in CONVERSION_HOOKS:
        try:
            hook = getattr(raw, name, None)
        except Exception:
            continue
        if callable(hook):
            return hook
    return None


def classify_due_value(raw: Any) -> DueValueShape:
    """Decide which encoding `raw` uses; first match wins."""
    if isinstance(raw, str):
        return DueValueShape.TEXT
    if _seconds_field(raw) is not None:
        return DueValueShape.EPOCH_SECONDS
    if _conversion_hook(raw) is not None:
        return DueValueShape.CONVERTIBLE
    return DueValueShape.OTHER


def _from_epoch_ms(ms: float) -> datetime | None:
    try:
        return datetime.fromtimestamp(ms / 1000, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        return None


def _parse_text(raw: str) -> datetime | None:
    text = raw.strip()
    if text[-1:] in ("Z", "z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


def _from_epoch_seconds(raw: Any) -> datetime | None:
    seconds = _seconds_field(raw)
    if seconds is None:
        return None
    return _from_epoch_ms(seconds * 1000)


def _best_effort(raw: Any) -> datetime | None:
    if isinstance(raw, datetime):
        return raw
    if isinstance(raw, date):
        return datetime.combine(raw, time())
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        return _from_epoch_ms(raw)
    return None


def _from_conversion(raw: Any) -> datetime | None:
    hook = _conversion_hook(raw)
    if hook is None:
        return None
    return _best_effort(hook())


_RESOLVERS: dict[DueValueShape, Callable[[Any], datetime | None]] = {
    DueValueShape.TEXT: _parse_text,
    DueValueShape.EPOCH_SECONDS: _from_epoch_seconds,
    DueValueShape.CONVERTIBLE: _from_conversion,
    DueValueShape.OTHER: _best_effort,
}


def _valid_instant(value: datetime | None) -> datetime | None:
    if value is None:
        return None
    try:
        local = value.astimezone()
        local.timestamp()
    except (OverflowError, OSError, ValueError):
        return None
    return local


def normalize_due_date(raw: Any) -> datetime | None:
    """
    Turn a raw due value into an aware local datetime.

    Returns None (unrepresentable) for missing, malformed or out-of-range
    values. Naive values are read as local wall-clock time.
    """
    if raw is None:
        return None

    try:
        shape = classify_due_value(raw)
        instant = _valid_instant(_RESOLVERS[shape](raw))
    except Exception:
        logger.warning("Error resolving due date %r", raw, exc_info=True)
        return None

    if instant is None and not (isinstance(raw, str) and not raw.strip()):
        logger.debug("Unrepresentable due date %r (shape=%s)", raw, shape.value)
    return instant


def end_of_local_day(day: date) -> datetime:
    """Last millisecond (23:59:59.999) of a local calendar day, with that day's own UTC offset."""
    return datetime.combine(day, time(23, 59, 59, 999000)).astimezone()


def end_of_day(instant: datetime) -> datetime:
    """Last millisecond (23:59:59.999) of the local calendar day of `instant`."""
    return end_of_local_day(instant.astimezone().date())
