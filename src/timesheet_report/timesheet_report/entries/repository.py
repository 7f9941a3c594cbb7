from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol, Sequence

from ..core.enums import AcquisitionStatus
from .model import TimeEntry


class EntrySource(Protocol):
    def fetch(self) -> Sequence[TimeEntry]:
        """Return every entry of the source or raise AcquisitionError."""

        raise NotImplementedError


@dataclass(frozen=True)
class AcquisitionResult:
    """Outcome of one acquisition: the entries and where they came from."""

    entries: tuple[TimeEntry, ...]
    status: AcquisitionStatus
    reason: Optional[str] = None

    @property
    def is_fallback(self) -> bool:
        return self.status == AcquisitionStatus.FALLBACK
