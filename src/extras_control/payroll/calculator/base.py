from __future__ import annotations

from abc import ABC, abstractmethod

from ...requests.model import ExtraRequest, WorkDay


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def daily_value(self, request: ExtraRequest, day: WorkDay) -> int:
        raise NotImplementedError

    @abstractmethod
    def total_value(self, request: ExtraRequest) -> int:
        raise NotImplementedError
