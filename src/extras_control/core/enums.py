from __future__ import annotations

from enum import Enum


class RequestStatus(str, Enum):
    """Estado do fluxo de aprovação de uma solicitação de extra."""

    SOLICITADO = "SOLICITADO"
    APROVADO = "APROVADO"
    REPROVADO = "REPROVADO"
    CANCELADO = "CANCELADO"

    @property
    def is_terminal(self) -> bool:
        return self is not RequestStatus.SOLICITADO


class ValueType(str, Enum):
    """Modelo de pagamento do extra."""

    COMBINADO = "combinado"
    HOURLY = "por_hora"

    @property
    def label(self) -> str:
        return "Combinado" if self is ValueType.COMBINADO else "Por hora"


class TimeField(str, Enum):
    """Campos de horário preenchidos pela portaria."""

    ARRIVAL = "arrival"
    BREAK_START = "break_start"
    BREAK_END = "break_end"
    DEPARTURE = "departure"

    @property
    def label(self) -> str:
        return {
            TimeField.ARRIVAL: "Chegada",
            TimeField.BREAK_START: "Saída Intervalo",
            TimeField.BREAK_END: "Volta Intervalo",
            TimeField.DEPARTURE: "Saída Final",
        }[self]
