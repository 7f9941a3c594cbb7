from __future__ import annotations

from .base import DurationCalculator
from ...entries.model import TimeEntry


class SignedDurationCalculator(DurationCalculator):
    """Default rule: out - in, a misordered entry counts negative."""

    def worked_hours(self, entry: TimeEntry) -> float:
        return entry.hours
