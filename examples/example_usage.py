"""Exemplo: usar a camada de serviços diretamente (sem Flask).

Cria uma solicitação, aprova, registra o ponto e imprime o recibo.
"""

from datetime import datetime

from extras_control.container import build_container
from extras_control.requests.service import NewExtraRequest, NewWorkDay


def main():
    container = build_container()
    now = datetime(2026, 2, 2, 7, 0)

    req = container.request_service.create_request(
        NewExtraRequest(
            extra_name="Maria Souza",
            sector="Restaurante",
            role="Garçom",
            requester="Eventos",
            leader_name="Ana Líder",
            reason="EVENTO",
            value=110,
            work_days=[NewWorkDay(date="2026-02-02", shift="Manhã")],
        ),
        now=now,
    )
    container.request_service.approve(request_id=req.request_id, approved_by="Carlos Gerente", now=now)
    for field, value in (("arrival", "08:00"), ("break_start", "12:00"), ("break_end", "13:00"), ("departure", "16:20")):
        container.portaria_service.register_time(
            request_id=req.request_id, work_date="2026-02-02", field=field, value=value, now=now
        )

    receipt = container.payroll_report_service.build_receipt(container.request_service.get(req.request_id))
    for line in receipt.as_table():
        print(line)


if __name__ == "__main__":
    main()
