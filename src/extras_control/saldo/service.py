from __future__ import annotations

from typing import Optional

from ..common.validators import require_non_negative
from ..core.constants import DEFAULT_VALOR_DIARIA
from .model import ExtraSaldoInput, ExtraSaldoResult

# Cada vaga aberta no quadro gera seis diárias no período.
DIARIAS_POR_VAGA = 6


def calculate_extra_saldo(data: ExtraSaldoInput, valor_diaria: float) -> ExtraSaldoResult:
    for field_name, value in (
        ("quadro_aprovado", data.quadro_aprovado),
        ("quadro_efetivo", data.quadro_efetivo),
        ("folgas", data.folgas),
        ("domingos", data.domingos),
        ("demanda", data.demanda),
        ("atestado", data.atestado),
        ("extras_solicitados", data.extras_solicitados),
        ("valor_diaria", valor_diaria),
    ):
        require_non_negative(value, field_name)

    quadro_aberto = max(0, data.quadro_aprovado - data.quadro_efetivo)
    vagas_diarias = quadro_aberto * DIARIAS_POR_VAGA
    total_diarias = quadro_aberto + data.folgas + data.domingos + vagas_diarias + data.demanda + data.atestado
    saldo = total_diarias - data.extras_solicitados

    return ExtraSaldoResult(
        quadro_aberto=quadro_aberto,
        vagas_diarias=vagas_diarias,
        total_diarias=total_diarias,
        saldo=saldo,
        valor_diaria=valor_diaria,
        valor=round(data.extras_solicitados * valor_diaria, 2),
        saldo_em_reais=round(saldo * valor_diaria * -1, 2),
    )


class SaldoService:
    def __init__(self, *, valor_diaria: float = DEFAULT_VALOR_DIARIA):
        self._valor_diaria = float(valor_diaria)

    @property
    def valor_diaria(self) -> float:
        return self._valor_diaria

    def calculate(self, data: ExtraSaldoInput, *, valor_diaria: Optional[float] = None) -> ExtraSaldoResult:
        return calculate_extra_saldo(data, self._valor_diaria if valor_diaria is None else float(valor_diaria))
