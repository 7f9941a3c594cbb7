from datetime import datetime

import pytest

from src.timesheet_report.timesheet_report.core.exceptions import ConfigurationError
from src.timesheet_report.timesheet_report.entries.model import TimeEntry
from src.timesheet_report.timesheet_report.summary.calculator.clamped_calculator import ClampedDurationCalculator
from src.timesheet_report.timesheet_report.summary.calculator.factory import calculator_for
from src.timesheet_report.timesheet_report.summary.calculator.overnight_calculator import OvernightDurationCalculator
from src.timesheet_report.timesheet_report.summary.calculator.signed_calculator import SignedDurationCalculator


NIGHT_SHIFT = TimeEntry.create(
    employee_name="Nora",
    time_in=datetime(2024, 1, 1, 22, 0),
    time_out=datetime(2024, 1, 1, 6, 0),
)

DAY_SHIFT = TimeEntry.create(
    employee_name="Dan",
    time_in=datetime(2024, 1, 1, 9, 0),
    time_out=datetime(2024, 1, 1, 17, 30),
)


def test_signed_calculator():
    calc = SignedDurationCalculator()
    assert calc.worked_hours(DAY_SHIFT) == pytest.approx(8.5)
    assert calc.worked_hours(NIGHT_SHIFT) == pytest.approx(-16.0)


def test_clamped_calculator():
    calc = ClampedDurationCalculator()
    assert calc.worked_hours(DAY_SHIFT) == pytest.approx(8.5)
    assert calc.worked_hours(NIGHT_SHIFT) == 0.0


def test_overnight_calculator():
    calc = OvernightDurationCalculator()
    assert calc.worked_hours(DAY_SHIFT) == pytest.approx(8.5)
    assert calc.worked_hours(NIGHT_SHIFT) == pytest.approx(8.0)


@pytest.mark.parametrize(
    "policy, expected",
    [
        ("signed", SignedDurationCalculator),
        ("CLAMP", ClampedDurationCalculator),
        (" overnight ", OvernightDurationCalculator),
    ],
)
def test_factory_picks_calculator(policy, expected):
    assert isinstance(calculator_for(policy), expected)


def test_factory_rejects_unknown_policy():
    with pytest.raises(ConfigurationError):
        calculator_for("round-up")
