from __future__ import annotations

from .base import DurationCalculator
from ...entries.model import TimeEntry


class OvernightDurationCalculator(DurationCalculator):
    """A shift that ends before it starts is taken to cross midnight."""

    def worked_hours(self, entry: TimeEntry) -> float:
        hours = entry.hours
        if hours < 0:
            hours += 24.0
        return hours
