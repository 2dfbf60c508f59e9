from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ExtraSaldoInput:
    """Quadro de um setor no período, base do saldo de diárias."""

    setor: str
    periodo_inicio: str
    periodo_fim: str
    quadro_aprovado: int
    quadro_efetivo: int
    folgas: int
    domingos: int
    demanda: int
    atestado: int
    extras_solicitados: int


@dataclass(frozen=True)
class ExtraSaldoResult:
    quadro_aberto: int
    vagas_diarias: int
    total_diarias: int
    saldo: int
    valor_diaria: float
    valor: float
    saldo_em_reais: float
