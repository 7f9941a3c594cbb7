from __future__ import annotations

from enum import Enum


class AcquisitionStatus(str, Enum):
    """Where the entries of one run came from."""

    REMOTE = "REMOTE"
    FALLBACK = "FALLBACK"


class PipelineOutcome(str, Enum):
    """Terminal state of one report run."""

    SUCCESS = "SUCCESS"
    NO_DATA = "NO_DATA"


class DurationPolicy(str, Enum):
    """How an entry whose time_out precedes time_in is counted."""

    SIGNED = "signed"
    CLAMP = "clamp"
    OVERNIGHT = "overnight"
