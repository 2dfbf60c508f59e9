from __future__ import annotations

from dataclasses import asdict

from flask import Flask, jsonify

from ..common.http import json_api, json_body, to_count, to_number
from ..container import Container
from .model import ExtraSaldoInput

_COUNT_FIELDS = (
    "quadro_aprovado",
    "quadro_efetivo",
    "folgas",
    "domingos",
    "demanda",
    "atestado",
    "extras_solicitados",
)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/saldo/calculate", methods=["POST"], endpoint="saldo_calculate")
    @json_api
    def saldo_calculate():
        data = json_body()
        counts = {name: to_count(data.get(name, 0), name) for name in _COUNT_FIELDS}
        saldo_input = ExtraSaldoInput(
            setor=str(data.get("setor", "")),
            periodo_inicio=str(data.get("periodo_inicio", "")),
            periodo_fim=str(data.get("periodo_fim", "")),
            **counts,
        )
        valor_diaria = data.get("valor_diaria")
        result = container.saldo_service.calculate(
            saldo_input,
            valor_diaria=None if valor_diaria is None else to_number(valor_diaria, "valor_diaria"),
        )
        return jsonify({"success": True, "result": asdict(result)})
