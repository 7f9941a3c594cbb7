from __future__ import annotations

from dataclasses import dataclass

from ..summary.model import EmployeeSummary


@dataclass(frozen=True)
class ReportRow:
    """Read-model for one table row and its pie-chart slice."""

    name: str
    hours: str
    chart_value: str
    low_hours: bool

    @classmethod
    def from_summary(cls, summary: EmployeeSummary, *, low_hours_threshold: float) -> "ReportRow":
        return cls(
            name=summary.name,
            hours=f"{summary.total_hours:.2f}",
            chart_value=f"{summary.total_hours:.1f}",
            low_hours=summary.total_hours < low_hours_threshold,
        )
