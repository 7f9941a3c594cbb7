from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class EmployeeSummary:
    """Total worked hours of one employee across all of their entries."""

    name: str
    total_hours: float
