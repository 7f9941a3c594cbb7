from __future__ import annotations

from ...core.enums import DurationPolicy
from ...core.exceptions import ConfigurationError
from .base import DurationCalculator
from .clamped_calculator import ClampedDurationCalculator
from .overnight_calculator import OvernightDurationCalculator
from .signed_calculator import SignedDurationCalculator

_CALCULATORS: dict[DurationPolicy, type[DurationCalculator]] = {
    DurationPolicy.SIGNED: SignedDurationCalculator,
    DurationPolicy.CLAMP: ClampedDurationCalculator,
    DurationPolicy.OVERNIGHT: OvernightDurationCalculator,
}


def calculator_for(policy: str) -> DurationCalculator:
    """Factory Pattern: pick the duration rule named in settings."""
    try:
        key = DurationPolicy(str(policy).strip().lower())
    except ValueError as e:
        allowed = ", ".join(p.value for p in DurationPolicy)
        raise ConfigurationError(f"unknown duration policy {policy!r} (expected one of: {allowed})") from e
    return _CALCULATORS[key]()
