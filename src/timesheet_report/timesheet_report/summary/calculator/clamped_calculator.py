from __future__ import annotations

from .base import DurationCalculator
from ...entries.model import TimeEntry


class ClampedDurationCalculator(DurationCalculator):
    """out - in, not below 0."""

    def worked_hours(self, entry: TimeEntry) -> float:
        return max(entry.hours, 0.0)
