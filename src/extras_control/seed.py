"""Demo data for local runs (SEED_DEMO_DATA=1)."""

from __future__ import annotations

from datetime import date, datetime, timedelta

from .container import Container
from .core.enums import TimeField, ValueType
from .requests.service import NewExtraRequest, NewWorkDay


def seed_demo_requests(container: Container, *, today: date) -> int:
    """Create a handful of requests covering both payment models. Returns how many."""
    yesterday = today - timedelta(days=1)
    now = datetime.combine(yesterday, datetime.min.time()).replace(hour=7)
    svc = container.request_service

    hourly = svc.create_request(
        NewExtraRequest(
            extra_name="Maria Souza",
            sector="Restaurante",
            role="Garçom",
            requester="Eventos",
            leader_name="Ana Líder",
            reason="EVENTO",
            value=110,
            work_days=[NewWorkDay(date=yesterday.isoformat(), shift="Manhã"), NewWorkDay(date=today.isoformat(), shift="Manhã")],
        ),
        now=now,
    )
    svc.approve(request_id=hourly.request_id, approved_by="Carlos Gerente", now=now)
    for field, value in (
        (TimeField.ARRIVAL, "08:05"),
        (TimeField.BREAK_START, "12:00"),
        (TimeField.BREAK_END, "13:00"),
        (TimeField.DEPARTURE, "16:25"),
    ):
        container.portaria_service.register_time(
            request_id=hourly.request_id,
            work_date=yesterday.isoformat(),
            field=field,
            value=value,
            registered_by="Portaria",
            now=now,
        )

    svc.create_request(
        NewExtraRequest(
            extra_name="João Lima",
            sector="Governança",
            role="Camareira",
            requester="Governança",
            leader_name="Ana Líder",
            reason="QUADRO ABERTO",
            value=130,
            value_type=ValueType.COMBINADO,
            work_days=[NewWorkDay(date=today.isoformat(), shift="Tarde")],
            urgency=True,
        ),
        now=now,
    )

    svc.create_request(
        NewExtraRequest(
            extra_name="Pedro Alves",
            sector="Recepção",
            role="Mensageiro",
            requester="Recepção",
            leader_name="Ana Líder",
            reason="DEMANDA",
            value=120,
            work_days=[NewWorkDay(date=today.isoformat(), shift="Noite")],
        ),
        now=now,
    )
    return len(svc.list_requests())
