from __future__ import annotations

import io

from flask import Flask, jsonify, request, send_file

from ..common.http import json_api, json_body, to_number
from ..core.enums import RequestStatus
from ..core.exceptions import ValidationError
from ..container import Container
from ..reports.exporters import XLSX_MIMETYPE
from ..reports.pdf import PDF_MIMETYPE
from .serializers import request_to_dict
from .service import NewExtraRequest, NewWorkDay


def register(app: Flask, container: Container) -> None:
    def _parse_status(value: str):
        v = (value or "").strip().upper()
        if not v:
            return None
        try:
            return RequestStatus(v)
        except ValueError:
            raise ValidationError("Status inválido")

    def _parse_new_request(data: dict) -> NewExtraRequest:
        days = data.get("work_days") or []
        if not isinstance(days, list) or not all(isinstance(d, dict) for d in days):
            raise ValidationError("work_days deve ser uma lista de {date, shift}")
        consolidated = data.get("consolidated_total")
        return NewExtraRequest(
            extra_name=data.get("extra_name", ""),
            sector=data.get("sector", ""),
            role=data.get("role", ""),
            requester=data.get("requester", ""),
            leader_name=data.get("leader_name", ""),
            reason=data.get("reason", ""),
            value=to_number(data.get("value", 0), "Valor"),
            value_type=data.get("value_type") or "por_hora",
            consolidated_total=None if consolidated is None else to_number(consolidated, "Total consolidado"),
            work_days=[NewWorkDay(date=str(d.get("date", "")), shift=str(d.get("shift", ""))) for d in days],
            urgency=bool(data.get("urgency", False)),
            observations=data.get("observations"),
            extra_cpf=data.get("extra_cpf"),
        )

    @app.route("/api/requests", methods=["GET"], endpoint="list_requests")
    @json_api
    def list_requests():
        items = container.request_service.list_requests(
            status=_parse_status(request.args.get("status", "")),
            sector=(request.args.get("sector") or "").strip() or None,
        )
        return jsonify({"success": True, "requests": [request_to_dict(r) for r in items]})

    @app.route("/api/requests", methods=["POST"], endpoint="create_request")
    @json_api
    def create_request():
        req = container.request_service.create_request(_parse_new_request(json_body()))
        return jsonify({"success": True, "request": request_to_dict(req)}), 201

    @app.route("/api/requests/<int:request_id>", methods=["GET"], endpoint="get_request")
    @json_api
    def get_request(request_id: int):
        return jsonify({"success": True, "request": request_to_dict(container.request_service.get(request_id))})

    @app.route("/api/requests/<int:request_id>/approve", methods=["POST"], endpoint="approve_request")
    @json_api
    def approve_request(request_id: int):
        data = json_body()
        req = container.request_service.approve(request_id=request_id, approved_by=data.get("approved_by", ""))
        return jsonify({"success": True, "request": request_to_dict(req)})

    @app.route("/api/requests/<int:request_id>/reject", methods=["POST"], endpoint="reject_request")
    @json_api
    def reject_request(request_id: int):
        data = json_body()
        req = container.request_service.reject(
            request_id=request_id,
            decided_by=data.get("decided_by", ""),
            reason=data.get("reason", ""),
        )
        return jsonify({"success": True, "request": request_to_dict(req)})

    @app.route("/api/requests/<int:request_id>/cancel", methods=["POST"], endpoint="cancel_request")
    @json_api
    def cancel_request(request_id: int):
        data = request.get_json(silent=True) or {}
        req = container.request_service.cancel(request_id=request_id, reason=data.get("reason", ""))
        return jsonify({"success": True, "request": request_to_dict(req)})

    @app.route("/api/requests/<int:request_id>/receipt", methods=["GET"], endpoint="request_receipt")
    @json_api
    def request_receipt(request_id: int):
        receipt = container.payroll_report_service.build_receipt(container.request_service.get(request_id))
        return jsonify(
            {
                "success": True,
                "code": receipt.code,
                "rows": receipt.rows,
                "total_hours": receipt.total_hours,
                "total_value": receipt.total_value,
            }
        )

    @app.route("/api/requests/<int:request_id>/receipt.xlsx", methods=["GET"], endpoint="request_receipt_xlsx")
    @json_api
    def request_receipt_xlsx(request_id: int):
        req = container.request_service.get(request_id)
        content = container.excel_exporter.single_receipt(req)
        return send_file(
            io.BytesIO(content),
            mimetype=XLSX_MIMETYPE,
            as_attachment=True,
            download_name=f"recibo-pagamento-{req.code}.xlsx",
        )

    @app.route("/api/requests/<int:request_id>/receipt.pdf", methods=["GET"], endpoint="request_receipt_pdf")
    @json_api
    def request_receipt_pdf(request_id: int):
        req = container.request_service.get(request_id)
        content = container.pdf_exporter.single_receipt(req)
        return send_file(
            io.BytesIO(content),
            mimetype=PDF_MIMETYPE,
            as_attachment=True,
            download_name=f"recibo-pagamento-{req.code}.pdf",
        )
