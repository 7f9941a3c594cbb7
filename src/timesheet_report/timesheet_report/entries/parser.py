"""Decode the remote time-entry document.

The feed is a JSON array of objects shaped like
``{"employee": {"name": ...}, "timeIn": ..., "timeOut": ...}``. Field names
are matched without regard to case. Elements with a missing or unreadable
timestamp are skipped; anything that is not an array of objects fails the
whole batch.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..common.datetime_utils import parse_timestamp
from ..core.exceptions import AcquisitionError
from .model import TimeEntry


@dataclass(frozen=True)
class ParsedBatch:
    entries: tuple[TimeEntry, ...]
    skipped: int = 0


def _field(record: Mapping[str, Any], name: str) -> Optional[Any]:
    wanted = name.lower()
    for key, value in record.items():
        if isinstance(key, str) and key.lower() == wanted:
            return value
    return None


def _employee_name(record: Mapping[str, Any]) -> Optional[str]:
    employee = _field(record, "employee")
    if not isinstance(employee, Mapping):
        return None
    name = _field(employee, "name")
    return name if isinstance(name, str) else None


def parse_entries(payload: Any) -> ParsedBatch:
    if payload is None:
        return ParsedBatch(entries=())
    if not isinstance(payload, list):
        raise AcquisitionError(f"expected a JSON array of entries, got {type(payload).__name__}")

    entries: list[TimeEntry] = []
    skipped = 0
    for index, record in enumerate(payload):
        if not isinstance(record, Mapping):
            raise AcquisitionError(f"entry #{index} is not an object")

        try:
            time_in = parse_timestamp(_field(record, "timeIn"))
            time_out = parse_timestamp(_field(record, "timeOut"))
        except (TypeError, ValueError, OverflowError):
            skipped += 1
            continue

        entries.append(
            TimeEntry.create(
                employee_name=_employee_name(record),
                time_in=time_in,
                time_out=time_out,
            )
        )

    return ParsedBatch(entries=tuple(entries), skipped=skipped)
