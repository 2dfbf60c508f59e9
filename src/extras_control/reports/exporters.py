"""Excel/CSV exports of recibos and listings.

Workbooks are written with pandas + openpyxl into memory (nothing touches the
disk); callers stream the returned bytes.
"""

from __future__ import annotations

import csv
import io
import logging
from typing import Sequence

import pandas as pd

from ..core.constants import EXCEL_SHEET_NAME_MAX
from ..core.enums import RequestStatus
from ..payroll.service import LISTING_COLUMNS, ListingData, PayrollReportService, ReceiptData
from ..requests.model import ExtraRequest

logger = logging.getLogger(__name__)

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

LISTING_CSV_FIELDS = [
    "code",
    "period",
    "sector",
    "role",
    "extra_name",
    "status",
    "approved_by",
    "value_type",
    "total_hours",
    "total_value",
]


def _sheet(rows: list[list]) -> pd.DataFrame:
    # Ragged rows are padded so blank spacer lines survive the DataFrame.
    width = max((len(r) for r in rows), default=1) or 1
    return pd.DataFrame([list(r) + [""] * (width - len(r)) for r in rows])


def _write_sheets(sheets: list[tuple[str, list[list]]]) -> bytes:
    output = io.BytesIO()
    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        for name, rows in sheets:
            _sheet(rows).to_excel(writer, index=False, header=False, sheet_name=name)
    return output.getvalue()


def receipt_rows(receipt: ReceiptData) -> list[list]:
    return [*receipt.header, [], *receipt.as_table()]


def listing_rows(listing: ListingData) -> list[list]:
    rows: list[list] = [["RELATÓRIO CONTROLE DE EXTRAS"], [], list(LISTING_COLUMNS)]
    for group in listing.groups:
        for r in group.rows:
            rows.append(
                [
                    r["period"],
                    r["sector"],
                    r["role"],
                    r["extra_name"],
                    r["status"],
                    r["approved_by"],
                    r["value_type"],
                    r["total_hours"],
                    r["total_value"],
                ]
            )
        rows.append([f"Subtotal ({group.sector})", "", "", "", "", "", "", "", group.subtotal])
        rows.append([])
        rows.append([])
    rows.append(["TOTAL GERAL", "", "", "", "", "", "", "", listing.grand_total])
    return rows


class ExcelExporter:
    def __init__(self, reports: PayrollReportService):
        self._reports = reports

    def single_receipt(self, request: ExtraRequest) -> bytes:
        receipt = self._reports.build_receipt(request)
        logger.info("Exporting receipt %s", request.code)
        return _write_sheets([("Recibo", receipt_rows(receipt))])

    def bulk_receipts(self, requests: Sequence[ExtraRequest]) -> bytes:
        """One sheet per approved request."""
        approved = [r for r in requests if r.status == RequestStatus.APROVADO]
        if not approved:
            return _write_sheets([("Info", [["Nenhuma solicitação aprovada no período selecionado."]])])

        sheets = []
        for req in approved:
            receipt = self._reports.build_receipt(req)
            sheets.append((req.code[:EXCEL_SHEET_NAME_MAX], receipt_rows(receipt)))
        logger.info("Exporting %d receipts", len(sheets))
        return _write_sheets(sheets)

    def listing(self, requests: Sequence[ExtraRequest]) -> bytes:
        return _write_sheets([("Listagem", listing_rows(self._reports.build_listing(requests)))])


def listing_csv(listing: ListingData) -> bytes:
    out = io.StringIO()
    writer = csv.DictWriter(out, fieldnames=LISTING_CSV_FIELDS, extrasaction="ignore")
    writer.writeheader()
    for group in listing.groups:
        for row in group.rows:
            writer.writerow(row)
    return out.getvalue().encode("utf-8-sig")
