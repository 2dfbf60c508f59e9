from __future__ import annotations

import threading
from datetime import datetime

import pytest

from extras_control.core.constants import URGENCY_APPROVER
from extras_control.core.enums import RequestStatus, ValueType
from extras_control.core.exceptions import NotFoundError, ValidationError
from extras_control.requests.memory_request_repository import InMemoryRequestRepository
from extras_control.requests.service import NewExtraRequest, NewWorkDay, RequestService


def _new(**overrides) -> NewExtraRequest:
    fields = dict(
        extra_name="Maria Souza",
        sector="Restaurante",
        role="Garçom",
        requester="Eventos",
        leader_name="Ana Líder",
        reason="EVENTO",
        value=110,
        work_days=[NewWorkDay(date="2026-02-02", shift="Manhã")],
    )
    fields.update(overrides)
    return NewExtraRequest(**fields)


@pytest.fixture
def svc():
    return RequestService(InMemoryRequestRepository())


def test_create_request_starts_as_solicitado(svc, fixed_now):
    req = svc.create_request(_new(), now=fixed_now)

    assert req.status == RequestStatus.SOLICITADO
    assert req.code == "EXT-2026-0001"
    assert req.value_type == ValueType.HOURLY
    assert req.consolidated_total is None
    assert req.approved_by is None
    assert svc.get(req.request_id) == req


def test_codes_are_sequential(svc, fixed_now):
    svc.create_request(_new(), now=fixed_now)
    second = svc.create_request(_new(extra_name="João"), now=fixed_now)
    assert second.code == "EXT-2026-0002"


def test_urgent_request_is_auto_approved(svc, fixed_now):
    req = svc.create_request(_new(urgency=True), now=fixed_now)

    assert req.status == RequestStatus.APROVADO
    assert req.approved_by == URGENCY_APPROVER
    assert req.approved_at == fixed_now


def test_value_type_accepts_strings(svc, fixed_now):
    req = svc.create_request(_new(value_type="Combinado"), now=fixed_now)
    assert req.value_type == ValueType.COMBINADO

    with pytest.raises(ValidationError):
        svc.create_request(_new(value_type="mensal"), now=fixed_now)


@pytest.mark.parametrize(
    "overrides",
    [
        {"extra_name": "  "},
        {"sector": ""},
        {"reason": ""},
        {"value": -1},
        {"consolidated_total": -10},
        {"work_days": []},
        {"work_days": [NewWorkDay(date="02/02/2026", shift="Manhã")]},
        {"work_days": [NewWorkDay(date="2026-02-02", shift="Manhã"), NewWorkDay(date="2026-02-02", shift="Tarde")]},
    ],
)
def test_create_request_validation(svc, fixed_now, overrides):
    with pytest.raises(ValidationError):
        svc.create_request(_new(**overrides), now=fixed_now)


def test_consolidated_zero_is_kept(svc, fixed_now):
    req = svc.create_request(_new(consolidated_total=0), now=fixed_now)
    assert req.consolidated_total == 0


def test_approve(svc, fixed_now):
    req = svc.create_request(_new(), now=fixed_now)
    later = datetime(2026, 2, 2, 9, 30)

    approved = svc.approve(request_id=req.request_id, approved_by="Carlos Gerente", now=later)

    assert approved.status == RequestStatus.APROVADO
    assert approved.approved_by == "Carlos Gerente"
    assert approved.approved_at == later
    assert svc.get(req.request_id).status == RequestStatus.APROVADO


def test_reject_requires_reason(svc, fixed_now):
    req = svc.create_request(_new(), now=fixed_now)

    with pytest.raises(ValidationError):
        svc.reject(request_id=req.request_id, decided_by="Carlos", reason=" ")

    rejected = svc.reject(request_id=req.request_id, decided_by="Carlos", reason="Sem orçamento")
    assert rejected.status == RequestStatus.REPROVADO
    assert rejected.rejection_reason == "Sem orçamento"


def test_cancel(svc, fixed_now):
    req = svc.create_request(_new(), now=fixed_now)
    cancelled = svc.cancel(request_id=req.request_id, reason="Evento adiado")
    assert cancelled.status == RequestStatus.CANCELADO
    assert cancelled.cancellation_reason == "Evento adiado"


@pytest.mark.parametrize("terminal", ["approve", "reject", "cancel"])
def test_terminal_states_do_not_transition(svc, fixed_now, terminal):
    req = svc.create_request(_new(), now=fixed_now)
    actions = {
        "approve": lambda: svc.approve(request_id=req.request_id, approved_by="Carlos"),
        "reject": lambda: svc.reject(request_id=req.request_id, decided_by="Carlos", reason="x"),
        "cancel": lambda: svc.cancel(request_id=req.request_id),
    }
    actions[terminal]()

    for action in actions.values():
        with pytest.raises(ValidationError):
            action()


def test_unknown_request(svc):
    with pytest.raises(NotFoundError):
        svc.approve(request_id=99, approved_by="Carlos")


def test_list_filters(svc, fixed_now):
    a = svc.create_request(_new(), now=fixed_now)
    svc.create_request(_new(sector="Governança"), now=fixed_now)
    svc.approve(request_id=a.request_id, approved_by="Carlos")

    assert [r.request_id for r in svc.list_requests(status=RequestStatus.APROVADO)] == [a.request_id]
    assert len(svc.list_requests(sector="Governança")) == 1
    assert len(svc.list_requests()) == 2


def test_list_without_limit_returns_every_request(svc, fixed_now):
    for i in range(501):
        svc.create_request(_new(extra_name=f"Extra {i}"), now=fixed_now)

    assert len(svc.list_requests()) == 500
    assert len(svc.list_requests(limit=None)) == 501


@pytest.mark.parametrize("bad", [float("nan"), float("inf")])
def test_rejects_non_finite_values(svc, fixed_now, bad):
    with pytest.raises(ValidationError):
        svc.create_request(_new(value=bad), now=fixed_now)
    with pytest.raises(ValidationError):
        svc.create_request(_new(consolidated_total=bad), now=fixed_now)


class _LockstepRepository(InMemoryRequestRepository):
    """Holds every `modify` caller until all of them have arrived."""

    def __init__(self, parties: int):
        super().__init__()
        self._barrier = threading.Barrier(parties)

    def modify(self, *, request_id, change):
        self._barrier.wait(timeout=5)
        return super().modify(request_id=request_id, change=change)


def test_concurrent_decisions_apply_only_once(fixed_now):
    svc = RequestService(_LockstepRepository(parties=2))
    req = svc.create_request(_new(), now=fixed_now)
    outcomes: list = []

    def run(action):
        try:
            outcomes.append(action().status)
        except ValidationError as e:
            outcomes.append(e)

    threads = [
        threading.Thread(target=run, args=(lambda: svc.approve(request_id=req.request_id, approved_by="Carlos"),)),
        threading.Thread(target=run, args=(lambda: svc.cancel(request_id=req.request_id, reason="Adiado"),)),
    ]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=10)

    winners = [o for o in outcomes if isinstance(o, RequestStatus)]
    assert len(outcomes) == 2
    assert len(winners) == 1
    assert svc.get(req.request_id).status == winners[0]
