from __future__ import annotations

import math
from typing import Any, Optional

from ..core.constants import UNKNOWN_EMPLOYEE_NAME
from ..core.exceptions import ConfigurationError

_TRUE_FLAGS = {"1", "true", "yes", "on"}
_FALSE_FLAGS = {"0", "false", "no", "off", ""}


def normalize_employee_name(value: Optional[Any]) -> str:
    """Absent or empty names group under "Unknown"; others are kept verbatim."""
    if value is None:
        return UNKNOWN_EMPLOYEE_NAME
    name = str(value)
    if name == "":
        return UNKNOWN_EMPLOYEE_NAME
    return name


def require_positive(value: float, field_name: str) -> float:
    if value is None or value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than 0")
    return value


def parse_float_setting(value: Any, field_name: str) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"{field_name} must be a number, got {value!r}") from e
    if not math.isfinite(number):
        raise ConfigurationError(f"{field_name} must be a finite number, got {value!r}")
    return number


def parse_flag_setting(value: Any, field_name: str) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_FLAGS:
        return True
    if text in _FALSE_FLAGS:
        return False
    raise ConfigurationError(f"{field_name} must be one of 1/0, true/false, yes/no, on/off, got {value!r}")
