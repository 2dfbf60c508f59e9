from __future__ import annotations

from dataclasses import dataclass

from ...core.enums import ValueType
from ...requests.model import ExtraRequest
from .base import PayrollCalculator
from .combinado_calculator import CombinadoCalculator
from .consolidated_calculator import ConsolidatedCalculator
from .hourly_calculator import HourlyCalculator


@dataclass
class PayrollCalculatorFactory:
    """Factory Pattern: choose the payment model for a request."""

    def for_request(self, request: ExtraRequest) -> PayrollCalculator:
        if request.consolidated_total is not None:
            return ConsolidatedCalculator()
        if request.value_type == ValueType.COMBINADO:
            return CombinadoCalculator()
        return HourlyCalculator()
