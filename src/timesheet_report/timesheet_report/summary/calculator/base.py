from __future__ import annotations

from abc import ABC, abstractmethod

from ...entries.model import TimeEntry


class DurationCalculator(ABC):
    """Calculator interface (Strategy Pattern for entry durations)."""

    @abstractmethod
    def worked_hours(self, entry: TimeEntry) -> float:
        raise NotImplementedError
