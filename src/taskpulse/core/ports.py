# src/taskpulse/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The classification engine never reads the wall clock on its own. Callers pass
a reference instant, or a Clock that is asked once per aggregate pass, so a
whole collection is classified against the same snapshot.
"""

from datetime import datetime
from typing import Protocol


class Clock(Protocol):
    """Source of the reference instant ("now") for one classification pass."""
    def now(self) -> datetime: ...

