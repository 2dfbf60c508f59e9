from __future__ import annotations

from dataclasses import dataclass
from itertools import groupby
from typing import Iterable, Optional, Sequence

from ..common.datetime_utils import format_date_br
from ..requests.model import ExtraRequest, WorkDay
from . import engine

RECEIPT_COLUMNS = [
    "Data",
    "Horário Chegada",
    "Início Intervalo",
    "Fim Intervalo",
    "Horário Saída",
    "Total Horas",
    "Valor",
]

LISTING_COLUMNS = [
    "Período",
    "Setor",
    "Função",
    "Nome Extra",
    "Status",
    "Aprovado por",
    "Tipo de Valor",
    "Total Horas",
    "Valor",
]


def format_money(amount: Optional[float]) -> str:
    """Receipt cell: "110.00", or "" when there is nothing to pay."""
    if not amount or amount <= 0:
        return ""
    return f"{amount:.2f}"


def work_period(work_days: Iterable[WorkDay]) -> str:
    dates = sorted(d.date for d in work_days)
    if not dates:
        return ""
    first, last = format_date_br(dates[0]), format_date_br(dates[-1])
    return first if first == last else f"{first} - {last}"


@dataclass(frozen=True)
class ReceiptData:
    code: str
    header: list[list[str]]
    rows: list[dict]
    total_hours: str
    total_value: int

    def as_table(self) -> list[list[str]]:
        """Column titles, one line per day, then the TOTAL line."""
        table = [list(RECEIPT_COLUMNS)]
        for r in self.rows:
            table.append(
                [r["date"], r["arrival"], r["break_start"], r["break_end"], r["departure"], r["total_hours"], r["value"]]
            )
        table.append(["TOTAL", "", "", "", "", self.total_hours, format_money(self.total_value) or "0.00"])
        return table


@dataclass(frozen=True)
class SectorGroup:
    sector: str
    rows: list[dict]
    subtotal: int


@dataclass(frozen=True)
class ListingData:
    groups: list[SectorGroup]
    grand_total: int


class PayrollReportService:
    """Recibos and listings; every figure comes from the payroll engine."""

    def build_receipt(self, request: ExtraRequest) -> ReceiptData:
        header = [
            ["RECIBO DE PAGAMENTO"],
            [],
            ["Nome", request.extra_name, "Demandante", request.requester],
            ["Setor", request.sector, "Função", request.role],
            ["Motivo", request.reason, "Aprovado por", request.approved_by or "N/A"],
            ["CPF", request.extra_cpf or "", "Período", work_period(request.work_days)],
        ]

        rows: list[dict] = []
        for day in request.work_days:
            tr = day.time_record
            minutes = engine.minutes_worked_in_day(tr)
            # Consolidated requests only show the total.
            value = engine.daily_value(request, day)
            rows.append(
                {
                    "date": format_date_br(day.date),
                    "arrival": (tr.arrival if tr else None) or "",
                    "break_start": (tr.break_start if tr else None) or "",
                    "break_end": (tr.break_end if tr else None) or "",
                    "departure": (tr.departure if tr else None) or "",
                    "total_hours": engine.minutes_to_hhmm(minutes),
                    "value": format_money(value),
                }
            )

        return ReceiptData(
            code=request.code,
            header=header,
            rows=rows,
            total_hours=engine.total_hours_worked(request.work_days),
            total_value=engine.total_value(request),
        )

    def build_listing(self, requests: Sequence[ExtraRequest]) -> ListingData:
        ordered = sorted(requests, key=lambda r: r.sector)
        groups: list[SectorGroup] = []
        grand_total = 0

        for sector, items in groupby(ordered, key=lambda r: r.sector):
            rows: list[dict] = []
            subtotal = 0
            for r in items:
                value = engine.total_value(r)
                subtotal += value
                rows.append(
                    {
                        "request_id": r.request_id,
                        "code": r.code,
                        "period": work_period(r.work_days),
                        "sector": r.sector,
                        "role": r.role,
                        "extra_name": r.extra_name,
                        "status": r.status.value,
                        "approved_by": r.approved_by or "—",
                        "value_type": "Consolidado" if r.consolidated_total is not None else r.value_type.label,
                        "total_hours": engine.total_hours_worked(r.work_days),
                        "total_value": value,
                    }
                )
            subtotal = engine.round_money(subtotal)
            grand_total += subtotal
            groups.append(SectorGroup(sector=sector, rows=rows, subtotal=subtotal))

        return ListingData(groups=groups, grand_total=engine.round_money(grand_total))
