from __future__ import annotations

from typing import Optional

from ..payroll import engine
from .model import ExtraRequest, TimeRecord


def _iso(value) -> Optional[str]:
    return value.isoformat() if value else None


def time_record_to_dict(record: Optional[TimeRecord]) -> Optional[dict]:
    if record is None:
        return None
    return {
        "arrival": record.arrival,
        "break_start": record.break_start,
        "break_end": record.break_end,
        "departure": record.departure,
        "registered_by": record.registered_by,
        "registered_at": _iso(record.registered_at),
        "observations": record.observations,
        "is_complete": record.is_complete,
    }


def request_to_dict(req: ExtraRequest) -> dict:
    return {
        "id": req.request_id,
        "code": req.code,
        "extra_name": req.extra_name,
        "extra_cpf": req.extra_cpf,
        "sector": req.sector,
        "role": req.role,
        "requester": req.requester,
        "leader_name": req.leader_name,
        "reason": req.reason,
        "value": req.value,
        "value_type": req.value_type.value,
        "consolidated_total": req.consolidated_total,
        "status": req.status.value,
        "urgency": req.urgency,
        "observations": req.observations,
        "rejection_reason": req.rejection_reason,
        "cancellation_reason": req.cancellation_reason,
        "approved_by": req.approved_by,
        "approved_at": _iso(req.approved_at),
        "created_at": _iso(req.created_at),
        "updated_at": _iso(req.updated_at),
        "work_days": [
            {
                "date": d.date,
                "shift": d.shift,
                "time_record": time_record_to_dict(d.time_record),
                "worked_hours": engine.minutes_to_hhmm(engine.minutes_worked_in_day(d.time_record)),
                "value": engine.daily_value(req, d),
            }
            for d in req.work_days
        ],
        "total_hours": engine.total_hours_worked(req.work_days),
        "total_value": engine.total_value(req),
    }
