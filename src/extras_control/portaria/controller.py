from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import now_local
from ..common.http import json_api, json_body, query_date
from ..container import Container
from ..requests.serializers import request_to_dict


def register(app: Flask, container: Container) -> None:
    @app.route("/api/portaria/today", methods=["GET"], endpoint="portaria_today")
    @json_api
    def portaria_today():
        today = query_date("date") or now_local().date()
        today_str = today.strftime("%Y-%m-%d")
        items = container.portaria_service.list_today(today, sector=(request.args.get("sector") or "").strip() or None)
        return jsonify(
            {
                "success": True,
                "date": today_str,
                "extras": [
                    dict(request_to_dict(r), is_complete=container.portaria_service.is_complete(r, today_str))
                    for r in items
                ],
            }
        )

    @app.route(
        "/api/portaria/<int:request_id>/days/<work_date>/time",
        methods=["POST"],
        endpoint="portaria_register_time",
    )
    @json_api
    def portaria_register_time(request_id: int, work_date: str):
        data = json_body()
        req = container.portaria_service.register_time(
            request_id=request_id,
            work_date=work_date,
            field=data.get("field", ""),
            value=data.get("value"),
            registered_by=data.get("registered_by"),
        )
        return jsonify({"success": True, "request": request_to_dict(req)})

    @app.route(
        "/api/portaria/<int:request_id>/days/<work_date>/observations",
        methods=["POST"],
        endpoint="portaria_register_observation",
    )
    @json_api
    def portaria_register_observation(request_id: int, work_date: str):
        data = json_body()
        req = container.portaria_service.register_observation(
            request_id=request_id,
            work_date=work_date,
            observations=data.get("observations"),
            registered_by=data.get("registered_by"),
        )
        return jsonify({"success": True, "request": request_to_dict(req)})
