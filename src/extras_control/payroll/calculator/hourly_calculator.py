from __future__ import annotations

from ...core.constants import HOURS_PER_STANDARD_SHIFT
from ...requests.model import ExtraRequest, WorkDay
from ..rounding import round_money
from ..timekeeping import minutes_worked_in_day
from .base import PayrollCalculator


class HourlyCalculator(PayrollCalculator):
    """`value` pays a standard 7h20 shift; each day is worth its hours at that rate."""

    def daily_value(self, request: ExtraRequest, day: WorkDay) -> int:
        hourly_rate = request.value / HOURS_PER_STANDARD_SHIFT
        return round_money((minutes_worked_in_day(day.time_record) / 60) * hourly_rate)

    def total_value(self, request: ExtraRequest) -> int:
        # Days are rounded individually before summing.
        return round_money(sum(self.daily_value(request, day) for day in request.work_days))
