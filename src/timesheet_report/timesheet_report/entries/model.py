from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import hours_between
from ..common.validators import normalize_employee_name


@dataclass(frozen=True)
class TimeEntry:
    """One recorded shift: who worked, from when, until when."""

    employee_name: str
    time_in: datetime
    time_out: datetime

    @classmethod
    def create(cls, *, employee_name: Optional[str], time_in: datetime, time_out: datetime) -> "TimeEntry":
        return cls(
            employee_name=normalize_employee_name(employee_name),
            time_in=time_in,
            time_out=time_out,
        )

    @property
    def hours(self) -> float:
        """Signed duration in hours; negative when time_out precedes time_in."""
        return hours_between(self.time_in, self.time_out)
