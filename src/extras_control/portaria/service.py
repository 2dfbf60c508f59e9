from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date, datetime
from typing import Callable, Optional, Sequence, Union

from ..common.datetime_utils import now_local
from ..common.validators import is_time_of_day, optional_text
from ..core.constants import DEFAULT_PORTARIA_USER
from ..core.enums import RequestStatus, TimeField
from ..core.exceptions import NotFoundError, ValidationError
from ..requests.model import ExtraRequest, TimeRecord
from ..requests.repository import RequestRepository

logger = logging.getLogger(__name__)


class PortariaService:
    """Registro de ponto feito pela portaria para extras aprovados."""

    def __init__(self, requests: RequestRepository):
        self._requests = requests

    @staticmethod
    def _parse_field(value: Union[TimeField, str]) -> TimeField:
        if isinstance(value, TimeField):
            return value
        try:
            return TimeField(value)
        except ValueError:
            raise ValidationError("Campo de horário inválido")

    @staticmethod
    def _parse_time(value: Optional[str]) -> Optional[str]:
        v = str(value or "").strip()
        if not v:
            return None
        if not is_time_of_day(v):
            raise ValidationError("Horário inválido (HH:MM)")
        return v

    def _change_day(
        self,
        request_id: int,
        work_date: str,
        build: Callable[[TimeRecord], TimeRecord],
        now: datetime,
    ) -> ExtraRequest:
        def apply(req: ExtraRequest) -> ExtraRequest:
            if req.status != RequestStatus.APROVADO:
                raise ValidationError("Somente solicitações aprovadas recebem registro de ponto")
            day = req.find_day(work_date)
            if not day:
                raise NotFoundError("Dia de trabalho não pertence à solicitação")
            record = build(day.time_record or TimeRecord())
            return replace(req.with_day(replace(day, time_record=record)), updated_at=now)

        updated = self._requests.modify(request_id=int(request_id), change=apply)
        if updated is None:
            raise NotFoundError("Solicitação não encontrada")
        return updated

    def list_today(self, today: date, *, sector: Optional[str] = None) -> Sequence[ExtraRequest]:
        today_str = today.strftime("%Y-%m-%d")
        out = [
            r
            for r in self._requests.list_requests(status=RequestStatus.APROVADO, sector=sector, limit=None)
            if r.find_day(today_str) is not None
        ]
        out.sort(key=lambda r: (r.sector, r.extra_name))
        return out

    def register_time(
        self,
        *,
        request_id: int,
        work_date: str,
        field: Union[TimeField, str],
        value: Optional[str],
        registered_by: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> ExtraRequest:
        """Set (or clear, with an empty value) one clock field of a work day."""
        now = now or now_local()
        time_field = self._parse_field(field)
        time_value = self._parse_time(value)

        stamp_by = (registered_by or "").strip() or DEFAULT_PORTARIA_USER
        updated = self._change_day(
            request_id,
            work_date,
            lambda current: replace(
                current.with_time(time_field, time_value),
                registered_by=stamp_by,
                registered_at=now,
            ),
            now,
        )
        logger.info("Portaria %s %s %s=%s", updated.code, work_date, time_field.value, time_value or "-")
        return updated

    def register_observation(
        self,
        *,
        request_id: int,
        work_date: str,
        observations: Optional[str],
        registered_by: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> ExtraRequest:
        now = now or now_local()
        stamp_by = (registered_by or "").strip() or DEFAULT_PORTARIA_USER
        return self._change_day(
            request_id,
            work_date,
            lambda current: replace(
                current,
                observations=optional_text(observations),
                registered_by=stamp_by,
                registered_at=now,
            ),
            now,
        )

    def is_complete(self, request: ExtraRequest, work_date: str) -> bool:
        day = request.find_day(work_date)
        return bool(day and day.time_record and day.time_record.is_complete)
