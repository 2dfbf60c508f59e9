from __future__ import annotations

from ...requests.model import ExtraRequest, WorkDay
from ..rounding import round_money
from .base import PayrollCalculator


class ConsolidatedCalculator(PayrollCalculator):
    """Total fixed by an override; nothing is attributed to individual days."""

    def daily_value(self, request: ExtraRequest, day: WorkDay) -> int:
        return 0

    def total_value(self, request: ExtraRequest) -> int:
        return round_money(request.consolidated_total)
