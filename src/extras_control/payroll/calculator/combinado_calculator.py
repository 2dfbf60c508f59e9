from __future__ import annotations

from ...requests.model import ExtraRequest, WorkDay
from ..rounding import round_money
from .base import PayrollCalculator


class CombinadoCalculator(PayrollCalculator):
    """Fixed value per day/turn, regardless of hours worked."""

    def daily_value(self, request: ExtraRequest, day: WorkDay) -> int:
        return round_money(request.value)

    def total_value(self, request: ExtraRequest) -> int:
        return round_money(request.value * max(1, len(request.work_days)))
