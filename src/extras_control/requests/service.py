from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Optional, Sequence, Union

from ..common.datetime_utils import now_local, try_parse_iso_date
from ..common.validators import optional_text, require_non_empty, require_non_negative
from ..core.constants import DEFAULT_LIST_LIMIT, URGENCY_APPROVER
from ..core.enums import RequestStatus, ValueType
from ..core.exceptions import NotFoundError, ValidationError
from .model import ExtraRequest, WorkDay
from .repository import RequestRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NewWorkDay:
    date: str
    shift: str


@dataclass(frozen=True)
class NewExtraRequest:
    extra_name: str
    sector: str
    role: str
    requester: str
    leader_name: str
    reason: str
    value: float
    work_days: Sequence[NewWorkDay]
    value_type: Union[ValueType, str] = ValueType.HOURLY
    consolidated_total: Optional[float] = None
    urgency: bool = False
    observations: Optional[str] = None
    extra_cpf: Optional[str] = None


class RequestService:
    def __init__(self, requests: RequestRepository):
        self._requests = requests

    @staticmethod
    def _parse_value_type(value: Union[ValueType, str, None]) -> ValueType:
        if isinstance(value, ValueType):
            return value
        try:
            return ValueType(str(value or ValueType.HOURLY.value).strip().lower())
        except ValueError:
            raise ValidationError("Tipo de valor inválido (combinado ou por_hora)")

    @staticmethod
    def _parse_work_days(days: Sequence[NewWorkDay]) -> tuple[WorkDay, ...]:
        if not days:
            raise ValidationError("Informe ao menos um dia de trabalho")

        out: list[WorkDay] = []
        seen: set[str] = set()
        for d in days:
            if try_parse_iso_date(d.date) is None:
                raise ValidationError(f"Data inválida (AAAA-MM-DD): {d.date!r}")
            if d.date in seen:
                raise ValidationError(f"Data repetida na solicitação: {d.date}")
            seen.add(d.date)
            out.append(WorkDay(date=d.date, shift=require_non_empty(d.shift, "Turno")))
        return tuple(out)

    @staticmethod
    def _code(year: int, request_id: int) -> str:
        return f"EXT-{year}-{request_id:04d}"

    def get(self, request_id: int) -> ExtraRequest:
        req = self._requests.get(request_id=int(request_id))
        if not req:
            raise NotFoundError("Solicitação não encontrada")
        return req

    def create_request(self, data: NewExtraRequest, *, now: Optional[datetime] = None) -> ExtraRequest:
        now = now or now_local()

        value = require_non_negative(float(data.value), "valor")
        consolidated = data.consolidated_total
        if consolidated is not None:
            consolidated = require_non_negative(float(consolidated), "total consolidado")

        extra_name = require_non_empty(data.extra_name, "Nome do extra")
        sector = require_non_empty(data.sector, "Setor")
        role = require_non_empty(data.role, "Função")
        requester = require_non_empty(data.requester, "Demandante")
        reason = require_non_empty(data.reason, "Motivo")
        value_type = self._parse_value_type(data.value_type)
        work_days = self._parse_work_days(data.work_days)

        request_id = self._requests.next_id()
        req = ExtraRequest(
            request_id=request_id,
            code=self._code(now.year, request_id),
            extra_name=extra_name,
            sector=sector,
            role=role,
            requester=requester,
            leader_name=(data.leader_name or "").strip(),
            reason=reason,
            value=value,
            value_type=value_type,
            consolidated_total=consolidated,
            work_days=work_days,
            status=RequestStatus.APROVADO if data.urgency else RequestStatus.SOLICITADO,
            created_at=now,
            updated_at=now,
            urgency=bool(data.urgency),
            observations=optional_text(data.observations),
            extra_cpf=optional_text(data.extra_cpf),
            approved_by=URGENCY_APPROVER if data.urgency else None,
            approved_at=now if data.urgency else None,
        )
        self._requests.add(req)
        logger.info("Created request %s (%s) status=%s", req.code, req.extra_name, req.status.value)
        return req

    def _decide(self, request_id: int, **changes) -> ExtraRequest:
        def transition(req: ExtraRequest) -> ExtraRequest:
            if req.status != RequestStatus.SOLICITADO:
                logger.warning("Refused transition of %s: already %s", req.code, req.status.value)
                raise ValidationError(f"Solicitação já finalizada ({req.status.value})")
            return replace(req, **changes)

        updated = self._requests.modify(request_id=int(request_id), change=transition)
        if updated is None:
            raise NotFoundError("Solicitação não encontrada")
        logger.info("Request %s -> %s", updated.code, updated.status.value)
        return updated

    def approve(self, *, request_id: int, approved_by: str, now: Optional[datetime] = None) -> ExtraRequest:
        now = now or now_local()
        return self._decide(
            request_id,
            status=RequestStatus.APROVADO,
            approved_by=require_non_empty(approved_by, "Aprovador"),
            approved_at=now,
            updated_at=now,
        )

    def reject(
        self,
        *,
        request_id: int,
        decided_by: str,
        reason: str,
        now: Optional[datetime] = None,
    ) -> ExtraRequest:
        now = now or now_local()
        require_non_empty(decided_by, "Responsável")
        return self._decide(
            request_id,
            status=RequestStatus.REPROVADO,
            rejection_reason=require_non_empty(reason, "Motivo da reprovação"),
            updated_at=now,
        )

    def cancel(self, *, request_id: int, reason: str = "", now: Optional[datetime] = None) -> ExtraRequest:
        now = now or now_local()
        return self._decide(
            request_id,
            status=RequestStatus.CANCELADO,
            cancellation_reason=optional_text(reason),
            updated_at=now,
        )

    def list_requests(
        self,
        *,
        status: Optional[RequestStatus] = None,
        sector: Optional[str] = None,
        limit: Optional[int] = DEFAULT_LIST_LIMIT,
    ) -> Sequence[ExtraRequest]:
        """`limit=None` lists every request."""
        return self._requests.list_requests(
            status=status,
            sector=sector,
            limit=None if limit is None else int(limit),
        )
