from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, Sequence

from ..common.datetime_utils import format_date_br
from ..core.constants import DEFAULT_EXPECTED_ARRIVAL
from ..core.enums import RequestStatus
from ..payroll import engine
from ..requests.model import ExtraRequest
from .filters import day_in_range, filter_requests


@dataclass(frozen=True)
class PunctualityRow:
    extra_name: str
    sector: str
    date: str
    arrival: str
    departure: str
    worked_hours: float
    is_late: bool
    delay_minutes: int


class AuditReportService:
    """Relatórios de auditoria da portaria (registros incompletos, pontualidade)."""

    def __init__(self, *, expected_arrival: str = DEFAULT_EXPECTED_ARRIVAL):
        self._expected_arrival = expected_arrival

    @staticmethod
    def _approved_days(requests, start, end, sector):
        for req in filter_requests(requests, start=start, end=end, sector=sector):
            if req.status != RequestStatus.APROVADO:
                continue
            for day in req.work_days:
                if (start or end) and not day_in_range(day, start, end):
                    continue
                yield req, day

    def incomplete_records(
        self,
        requests: Sequence[ExtraRequest],
        *,
        start: Optional[date] = None,
        end: Optional[date] = None,
        sector: Optional[str] = None,
    ) -> list[dict]:
        out: list[dict] = []
        for req, day in self._approved_days(requests, start, end, sector):
            tr = day.time_record
            if tr is None:
                missing = ["Todos os horários"]
            else:
                missing = [f.label for f in tr.missing_fields()]
            if not missing:
                continue
            out.append(
                {
                    "request_id": req.request_id,
                    "code": req.code,
                    "extra_name": req.extra_name,
                    "sector": req.sector,
                    "date": day.date,
                    "date_br": format_date_br(day.date),
                    "missing_fields": missing,
                    "has_all_times": bool(tr and tr.is_fully_registered),
                }
            )
        return out

    def punctuality(
        self,
        requests: Sequence[ExtraRequest],
        *,
        start: Optional[date] = None,
        end: Optional[date] = None,
        sector: Optional[str] = None,
        expected_arrival: Optional[str] = None,
    ) -> list[PunctualityRow]:
        expected = engine.time_to_minutes(expected_arrival or self._expected_arrival)
        if expected is None:
            expected = engine.time_to_minutes(DEFAULT_EXPECTED_ARRIVAL)

        out: list[PunctualityRow] = []
        for req, day in self._approved_days(requests, start, end, sector):
            tr = day.time_record
            if not tr or not tr.is_complete:
                continue
            arrival = engine.time_to_minutes(tr.arrival)
            if arrival is None:
                continue
            delay = max(0, arrival - expected)
            out.append(
                PunctualityRow(
                    extra_name=req.extra_name,
                    sector=req.sector,
                    date=day.date,
                    arrival=tr.arrival,
                    departure=tr.departure,
                    worked_hours=engine.round_hours_to_one_decimal(engine.minutes_worked_in_day(tr) / 60),
                    is_late=delay > 0,
                    delay_minutes=delay,
                )
            )
        out.sort(key=lambda r: (r.date, r.extra_name))
        return out
