"""PDF recibos and listing, laid out with reportlab's platypus flowables.

Same figures as the Excel exports: every table is built from
`PayrollReportService` output, never recomputed here.
"""

from __future__ import annotations

import io
import logging
from typing import Sequence

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4, landscape
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import PageBreak, Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from ..common.datetime_utils import now_local
from ..core.enums import RequestStatus
from ..payroll.service import PayrollReportService, ReceiptData
from ..requests.model import ExtraRequest
from .exporters import listing_rows

logger = logging.getLogger(__name__)

PDF_MIMETYPE = "application/pdf"

_HEADER_FILL = colors.HexColor("#F0F0F0")
_BRAND_GREEN = colors.HexColor("#14532D")


def _cells(rows: list[list]) -> list[list[str]]:
    width = max((len(r) for r in rows), default=1) or 1
    return [[str(c) for c in r] + [""] * (width - len(r)) for r in rows]


def _grid(rows: list[list], *, bold_last: bool = False) -> Table:
    style = [
        ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
        ("BACKGROUND", (0, 0), (-1, 0), _HEADER_FILL),
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ("FONTSIZE", (0, 0), (-1, -1), 8),
        ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
    ]
    if bold_last:
        style.append(("FONTNAME", (0, -1), (-1, -1), "Helvetica-Bold"))
    table = Table(_cells(rows), repeatRows=1)
    table.setStyle(TableStyle(style))
    return table


def _render(story: list, *, title: str, pagesize=A4) -> bytes:
    output = io.BytesIO()
    doc = SimpleDocTemplate(
        output,
        pagesize=pagesize,
        title=title,
        leftMargin=15 * mm,
        rightMargin=15 * mm,
        topMargin=15 * mm,
        bottomMargin=15 * mm,
    )
    doc.build(story)
    return output.getvalue()


class PdfExporter:
    def __init__(self, reports: PayrollReportService):
        self._reports = reports
        self._styles = getSampleStyleSheet()

    def _receipt_story(self, receipt: ReceiptData) -> list:
        title = ParagraphStyle("ReceiptTitle", parent=self._styles["Title"], textColor=_BRAND_GREEN)
        # Header rows come as label/value pairs; the title row is drawn separately.
        fields = [row for row in receipt.header if len(row) == 4]
        info = Table(_cells(fields))
        info.setStyle(
            TableStyle(
                [
                    ("FONTNAME", (0, 0), (0, -1), "Helvetica-Bold"),
                    ("FONTNAME", (2, 0), (2, -1), "Helvetica-Bold"),
                    ("FONTSIZE", (0, 0), (-1, -1), 9),
                ]
            )
        )
        signatures = Table(
            [
                ["_" * 40, "_" * 40],
                ["Assinatura do Funcionário Extra", "Assinatura do Líder Responsável"],
            ]
        )
        signatures.setStyle(TableStyle([("ALIGN", (0, 0), (-1, -1), "CENTER"), ("FONTSIZE", (0, 0), (-1, -1), 9)]))
        return [
            Paragraph("RECIBO DE PAGAMENTO", title),
            Paragraph(receipt.code, self._styles["Heading3"]),
            info,
            Spacer(1, 6 * mm),
            _grid(receipt.as_table(), bold_last=True),
            Spacer(1, 20 * mm),
            signatures,
            Spacer(1, 6 * mm),
            Paragraph(f"Impresso em: {now_local().strftime('%d/%m/%Y %H:%M')}", self._styles["Normal"]),
        ]

    def single_receipt(self, request: ExtraRequest) -> bytes:
        receipt = self._reports.build_receipt(request)
        logger.info("Exporting PDF receipt %s", request.code)
        return _render(self._receipt_story(receipt), title=f"Recibo {request.code}")

    def bulk_receipts(self, requests: Sequence[ExtraRequest]) -> bytes:
        """One page per approved request."""
        approved = [r for r in requests if r.status == RequestStatus.APROVADO]
        if not approved:
            empty = Paragraph("Nenhuma solicitação aprovada no período selecionado.", self._styles["Normal"])
            return _render([empty], title="Recibos de pagamento")

        story: list = []
        for i, req in enumerate(approved):
            if i:
                story.append(PageBreak())
            story.extend(self._receipt_story(self._reports.build_receipt(req)))
        logger.info("Exporting %d PDF receipts", len(approved))
        return _render(story, title="Recibos de pagamento")

    def listing(self, requests: Sequence[ExtraRequest]) -> bytes:
        rows = listing_rows(self._reports.build_listing(requests))
        # Drop the sheet title and spacer; the PDF draws its own heading.
        table_rows = [r for r in rows[2:] if r]
        story = [
            Paragraph("RELATÓRIO CONTROLE DE EXTRAS", self._styles["Title"]),
            Paragraph(f"Gerado em: {now_local().strftime('%d/%m/%Y %H:%M')}", self._styles["Normal"]),
            Spacer(1, 4 * mm),
            _grid(table_rows, bold_last=True),
        ]
        return _render(story, title="Listagem de extras", pagesize=landscape(A4))
