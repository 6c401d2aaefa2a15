# src/taskpulse/core/clock.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .ports import Clock


def localize(instant: datetime) -> datetime:
    """Return an aware datetime in local time (naive input is read as local)."""
    return instant.astimezone()


class SystemClock:
    """Wall clock, local timezone."""

    def now(self) -> datetime:
        return datetime.now().astimezone()


@dataclass(slots=True, frozen=True)
class FixedClock:
    """Clock pinned to one instant (tests, replays, report snapshots)."""

    instant: datetime

    def now(self) -> datetime:
        return localize(self.instant)


def resolve_now(now: datetime | None = None, clock: Clock | None = None) -> datetime:
    """
    Pick the reference instant for one pass.

    Priority: explicit `now`, then `clock`, then the system clock.
    The result is always aware and expressed in local time.
    """
    if now is not None:
        return localize(now)
    if clock is not None:
        return localize(clock.now())
    return SystemClock().now()
