from __future__ import annotations

from typing import Iterable, Optional

from ..entries.model import TimeEntry
from .calculator.base import DurationCalculator
from .calculator.signed_calculator import SignedDurationCalculator
from .model import EmployeeSummary


class SummaryService:
    def __init__(self, *, calculator: Optional[DurationCalculator] = None):
        self._calculator = calculator or SignedDurationCalculator()

    def summarize(self, entries: Iterable[TimeEntry]) -> list[EmployeeSummary]:
        """Total hours per employee name, highest first.

        Names are compared exactly. Employees with equal totals keep the
        order in which their name first appeared in ``entries``.
        """
        totals: dict[str, float] = {}
        for entry in entries:
            hours = self._calculator.worked_hours(entry)
            totals[entry.employee_name] = totals.get(entry.employee_name, 0.0) + hours

        summary = [EmployeeSummary(name=name, total_hours=hours) for name, hours in totals.items()]
        summary.sort(key=lambda s: s.total_hours, reverse=True)
        return summary
