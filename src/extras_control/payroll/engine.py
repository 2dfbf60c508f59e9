"""Time-accounting and payroll engine shared by every report and export.

Pure functions only: no I/O, no shared state, never raises on incomplete
clock data.
"""

from __future__ import annotations

from ..requests.model import ExtraRequest, WorkDay
from .calculator.factory import PayrollCalculatorFactory
from .rounding import round_hours_to_integer, round_hours_to_one_decimal, round_money
from .timekeeping import (
    hours_worked_label,
    minutes_to_hhmm,
    minutes_worked_in_day,
    time_to_minutes,
    total_hours_worked,
    total_minutes_worked,
)

__all__ = [
    "daily_value",
    "hours_worked_label",
    "minutes_to_hhmm",
    "minutes_worked_in_day",
    "round_hours_to_integer",
    "round_hours_to_one_decimal",
    "round_money",
    "time_to_minutes",
    "total_hours_worked",
    "total_minutes_worked",
    "total_value",
]

_factory = PayrollCalculatorFactory()


def daily_value(request: ExtraRequest, day: WorkDay) -> int:
    return _factory.for_request(request).daily_value(request, day)


def total_value(request: ExtraRequest) -> int:
    return _factory.for_request(request).total_value(request)
