from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Optional

from ..core.enums import RequestStatus, TimeField, ValueType


@dataclass(frozen=True)
class TimeRecord:
    """Batidas de ponto de um extra em um dia (strings HH:MM, todas opcionais)."""

    arrival: Optional[str] = None
    break_start: Optional[str] = None
    break_end: Optional[str] = None
    departure: Optional[str] = None
    registered_by: Optional[str] = None
    registered_at: Optional[datetime] = None
    observations: Optional[str] = None

    @property
    def is_complete(self) -> bool:
        """Arrival and departure set; breaks stay optional."""
        return bool(self.arrival and self.departure)

    @property
    def is_fully_registered(self) -> bool:
        return all(self.get(f) for f in TimeField)

    def get(self, time_field: TimeField) -> Optional[str]:
        return getattr(self, time_field.value)

    def missing_fields(self) -> list[TimeField]:
        return [f for f in TimeField if not self.get(f)]

    def with_time(self, time_field: TimeField, value: Optional[str]) -> "TimeRecord":
        return replace(self, **{time_field.value: value})


@dataclass(frozen=True)
class WorkDay:
    date: str
    shift: str
    time_record: Optional[TimeRecord] = None


@dataclass(frozen=True)
class ExtraRequest:
    """Solicitação de pagamento de um extra (um ou mais dias)."""

    request_id: int
    code: str
    extra_name: str
    sector: str
    role: str
    requester: str
    leader_name: str
    reason: str
    value: float
    status: RequestStatus
    created_at: datetime
    updated_at: datetime
    value_type: ValueType = ValueType.HOURLY
    consolidated_total: Optional[float] = None
    work_days: tuple[WorkDay, ...] = field(default_factory=tuple)
    urgency: bool = False
    observations: Optional[str] = None
    extra_cpf: Optional[str] = None
    rejection_reason: Optional[str] = None
    cancellation_reason: Optional[str] = None
    approved_by: Optional[str] = None
    approved_at: Optional[datetime] = None

    def find_day(self, work_date: str) -> Optional[WorkDay]:
        for day in self.work_days:
            if day.date == work_date:
                return day
        return None

    def with_day(self, day: WorkDay) -> "ExtraRequest":
        """Copy of the request with the work day for `day.date` replaced."""
        days = tuple(day if d.date == day.date else d for d in self.work_days)
        return replace(self, work_days=days)
