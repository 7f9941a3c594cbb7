from __future__ import annotations

from datetime import datetime
from typing import Sequence

from .model import TimeEntry


def _shift(name: str, start_hour: int, end_hour: int) -> TimeEntry:
    return TimeEntry.create(
        employee_name=name,
        time_in=datetime(2024, 1, 1, start_hour, 0, 0),
        time_out=datetime(2024, 1, 1, end_hour, 0, 0),
    )


FALLBACK_ENTRIES: tuple[TimeEntry, ...] = (
    _shift("Alice", 9, 17),
    _shift("Bob", 10, 15),
    _shift("Charlie", 8, 20),
    _shift("Short Worker", 9, 10),
)


class FallbackEntrySource:
    """Built-in dataset used when the remote feed is unavailable."""

    def fetch(self) -> Sequence[TimeEntry]:
        return FALLBACK_ENTRIES
