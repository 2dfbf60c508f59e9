from __future__ import annotations

import io

from pypdf import PdfReader

from extras_control.core.enums import RequestStatus, ValueType
from extras_control.payroll.service import PayrollReportService
from extras_control.reports.pdf import PdfExporter


def _pages(content: bytes) -> list[str]:
    assert content.startswith(b"%PDF")
    return [page.extract_text() for page in PdfReader(io.BytesIO(content)).pages]


def test_single_receipt_pdf(make_request, make_day):
    req = make_request(work_days=(make_day("2026-02-02", "08:00", "15:20"),))

    pages = _pages(PdfExporter(PayrollReportService()).single_receipt(req))

    assert len(pages) == 1
    text = pages[0]
    assert "RECIBO DE PAGAMENTO" in text
    assert "EXT-2026-0001" in text
    assert "Maria Souza" in text
    assert "02/02/2026" in text
    assert "07:20" in text
    assert "110.00" in text


def test_bulk_receipts_pdf_one_page_per_approved(make_request):
    requests = [
        make_request(request_id=1, code="EXT-2026-0001"),
        make_request(request_id=2, code="EXT-2026-0002", status=RequestStatus.REPROVADO),
        make_request(request_id=3, code="EXT-2026-0003"),
    ]

    pages = _pages(PdfExporter(PayrollReportService()).bulk_receipts(requests))

    assert len(pages) == 2
    assert "EXT-2026-0001" in pages[0]
    assert "EXT-2026-0003" in pages[1]
    assert not any("EXT-2026-0002" in p for p in pages)


def test_bulk_receipts_pdf_without_approved(make_request):
    pages = _pages(PdfExporter(PayrollReportService()).bulk_receipts([make_request(status=RequestStatus.CANCELADO)]))

    assert len(pages) == 1
    assert "Nenhuma" in pages[0]


def test_listing_pdf(make_request):
    requests = [
        make_request(request_id=1, value_type=ValueType.COMBINADO, value=50),
        make_request(request_id=2, sector="Lazer", value_type=ValueType.COMBINADO, value=130),
    ]

    text = "".join(_pages(PdfExporter(PayrollReportService()).listing(requests)))

    assert "Subtotal (Lazer)" in text
    assert "TOTAL GERAL" in text
    assert "180" in text
