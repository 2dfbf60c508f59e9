from __future__ import annotations

from datetime import datetime

import pytest

from extras_control.core.enums import RequestStatus, ValueType
from extras_control.requests.model import ExtraRequest, TimeRecord, WorkDay


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 2, 2, 8, 0, 0)


@pytest.fixture
def make_request(fixed_now):
    """Build an ExtraRequest with sensible defaults; override any field by keyword."""

    def _make(**overrides) -> ExtraRequest:
        fields = dict(
            request_id=1,
            code="EXT-2026-0001",
            extra_name="Maria Souza",
            sector="Restaurante",
            role="Garçom",
            requester="Eventos",
            leader_name="Ana Líder",
            reason="EVENTO",
            value=110.0,
            value_type=ValueType.HOURLY,
            status=RequestStatus.APROVADO,
            created_at=fixed_now,
            updated_at=fixed_now,
            work_days=(WorkDay(date="2026-02-02", shift="Manhã"),),
        )
        fields.update(overrides)
        return ExtraRequest(**fields)

    return _make


@pytest.fixture
def make_day():
    def _make(date: str, arrival=None, departure=None, break_start=None, break_end=None, shift="Manhã") -> WorkDay:
        record = TimeRecord(arrival=arrival, departure=departure, break_start=break_start, break_end=break_end)
        return WorkDay(date=date, shift=shift, time_record=record)

    return _make
