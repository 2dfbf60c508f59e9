from __future__ import annotations

import io
from dataclasses import asdict

from flask import Flask, jsonify, request, send_file

from ..common.datetime_utils import now_local
from ..common.http import json_api, query_date
from ..container import Container
from .exporters import XLSX_MIMETYPE, listing_csv
from .pdf import PDF_MIMETYPE
from .filters import filter_requests


def register(app: Flask, container: Container) -> None:
    def _selected_requests():
        sector = (request.args.get("sector") or "").strip() or None
        return filter_requests(
            container.request_service.list_requests(limit=None),
            start=query_date("start"),
            end=query_date("end"),
            sector=sector,
        )

    def _stamp() -> str:
        return now_local().strftime("%Y%m%d%H%M%S")

    @app.route("/api/reports/listing", methods=["GET"], endpoint="report_listing")
    @json_api
    def report_listing():
        listing = container.payroll_report_service.build_listing(_selected_requests())
        return jsonify(
            {
                "success": True,
                "groups": [asdict(g) for g in listing.groups],
                "grand_total": listing.grand_total,
            }
        )

    @app.route("/api/reports/listing.csv", methods=["GET"], endpoint="report_listing_csv")
    @json_api
    def report_listing_csv():
        listing = container.payroll_report_service.build_listing(_selected_requests())
        return app.response_class(
            listing_csv(listing),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename=listagem-extras-{_stamp()}.csv"},
        )

    @app.route("/api/reports/listing.xlsx", methods=["GET"], endpoint="report_listing_xlsx")
    @json_api
    def report_listing_xlsx():
        content = container.excel_exporter.listing(_selected_requests())
        return send_file(
            io.BytesIO(content),
            mimetype=XLSX_MIMETYPE,
            as_attachment=True,
            download_name=f"listagem-extras-{_stamp()}.xlsx",
        )

    @app.route("/api/reports/receipts.xlsx", methods=["GET"], endpoint="report_receipts_xlsx")
    @json_api
    def report_receipts_xlsx():
        content = container.excel_exporter.bulk_receipts(_selected_requests())
        return send_file(
            io.BytesIO(content),
            mimetype=XLSX_MIMETYPE,
            as_attachment=True,
            download_name=f"recibos-pagamento-{_stamp()}.xlsx",
        )

    @app.route("/api/reports/listing.pdf", methods=["GET"], endpoint="report_listing_pdf")
    @json_api
    def report_listing_pdf():
        content = container.pdf_exporter.listing(_selected_requests())
        return send_file(
            io.BytesIO(content),
            mimetype=PDF_MIMETYPE,
            as_attachment=True,
            download_name=f"listagem-extras-{_stamp()}.pdf",
        )

    @app.route("/api/reports/receipts.pdf", methods=["GET"], endpoint="report_receipts_pdf")
    @json_api
    def report_receipts_pdf():
        content = container.pdf_exporter.bulk_receipts(_selected_requests())
        return send_file(
            io.BytesIO(content),
            mimetype=PDF_MIMETYPE,
            as_attachment=True,
            download_name=f"recibos-pagamento-{_stamp()}.pdf",
        )

    @app.route("/api/reports/incomplete", methods=["GET"], endpoint="report_incomplete")
    @json_api
    def report_incomplete():
        rows = container.audit_report_service.incomplete_records(
            container.request_service.list_requests(limit=None),
            start=query_date("start"),
            end=query_date("end"),
            sector=(request.args.get("sector") or "").strip() or None,
        )
        return jsonify({"success": True, "records": rows})

    @app.route("/api/reports/punctuality", methods=["GET"], endpoint="report_punctuality")
    @json_api
    def report_punctuality():
        rows = container.audit_report_service.punctuality(
            container.request_service.list_requests(limit=None),
            start=query_date("start"),
            end=query_date("end"),
            sector=(request.args.get("sector") or "").strip() or None,
            expected_arrival=request.args.get("expected_arrival"),
        )
        late = [r for r in rows if r.is_late]
        return jsonify(
            {
                "success": True,
                "records": [asdict(r) for r in rows],
                "late_count": len(late),
                "on_time_count": len(rows) - len(late),
            }
        )
