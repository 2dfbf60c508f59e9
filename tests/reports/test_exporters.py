from __future__ import annotations

import io

import openpyxl

from extras_control.core.enums import RequestStatus, ValueType
from extras_control.payroll.service import PayrollReportService
from extras_control.reports.exporters import ExcelExporter, listing_csv


def _load(content: bytes):
    return openpyxl.load_workbook(io.BytesIO(content))


def _values(ws) -> list[list]:
    return [[c for c in row] for row in ws.iter_rows(values_only=True)]


def test_single_receipt_sheet(make_request, make_day):
    req = make_request(work_days=(make_day("2026-02-02", "08:00", "15:20"),))

    wb = _load(ExcelExporter(PayrollReportService()).single_receipt(req))

    assert wb.sheetnames == ["Recibo"]
    rows = _values(wb["Recibo"])
    assert rows[0][0] == "RECIBO DE PAGAMENTO"
    assert rows[-1][0] == "TOTAL"
    assert rows[-1][5] == "07:20"
    assert rows[-1][6] == "110.00"


def test_bulk_receipts_one_sheet_per_approved(make_request):
    requests = [
        make_request(request_id=1, code="EXT-2026-0001"),
        make_request(request_id=2, code="EXT-2026-0002", status=RequestStatus.REPROVADO),
        make_request(request_id=3, code="EXT-2026-0003"),
    ]

    wb = _load(ExcelExporter(PayrollReportService()).bulk_receipts(requests))

    assert wb.sheetnames == ["EXT-2026-0001", "EXT-2026-0003"]


def test_bulk_receipts_without_approved(make_request):
    wb = _load(ExcelExporter(PayrollReportService()).bulk_receipts([make_request(status=RequestStatus.CANCELADO)]))
    assert wb.sheetnames == ["Info"]


def test_listing_sheet_has_subtotals(make_request):
    requests = [
        make_request(request_id=1, value_type=ValueType.COMBINADO, value=50),
        make_request(request_id=2, sector="Lazer", value_type=ValueType.COMBINADO, value=130),
    ]

    wb = _load(ExcelExporter(PayrollReportService()).listing(requests))

    rows = _values(wb["Listagem"])
    labels = [r[0] for r in rows]
    assert "Subtotal (Lazer)" in labels
    assert "Subtotal (Restaurante)" in labels
    assert rows[-1][0] == "TOTAL GERAL"
    assert rows[-1][-1] == 180


def test_listing_csv(make_request):
    listing = PayrollReportService().build_listing([make_request(value_type=ValueType.COMBINADO, value=50)])

    text = listing_csv(listing).decode("utf-8-sig")

    header, first = text.splitlines()[:2]
    assert header.startswith("code,period,sector")
    assert first.startswith("EXT-2026-0001,02/02/2026,Restaurante")
    assert first.endswith(",50")
