from __future__ import annotations

from typing import Optional

from ..core.constants import LOG_PREFIX
from ..core.enums import AcquisitionStatus
from ..core.exceptions import AcquisitionError
from .fallback_entry_source import FallbackEntrySource
from .repository import AcquisitionResult, EntrySource


class EntryAcquisitionService:
    """Acquire entries from the primary source, or from the fallback on failure.

    A batch is never merged: it is either everything the primary source
    returned or the whole fallback dataset.
    """

    def __init__(self, primary: EntrySource, *, fallback: Optional[EntrySource] = None):
        self._primary = primary
        self._fallback = fallback or FallbackEntrySource()

    def acquire(self) -> AcquisitionResult:
        try:
            entries = tuple(self._primary.fetch())
        except AcquisitionError as e:
            print(f"{LOG_PREFIX} API failed: {e}")
            print(f"{LOG_PREFIX} Using fallback data instead...")
            return AcquisitionResult(
                entries=tuple(self._fallback.fetch()),
                status=AcquisitionStatus.FALLBACK,
                reason=str(e),
            )

        print(f"{LOG_PREFIX} Data loaded from API ({len(entries)} entries).")
        return AcquisitionResult(entries=entries, status=AcquisitionStatus.REMOTE)
