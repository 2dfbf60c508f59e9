from __future__ import annotations

from threading import Lock
from typing import Callable, Iterable, Optional, Sequence

from ..core.enums import RequestStatus
from .model import ExtraRequest
from .repository import RequestRepository


class InMemoryRequestRepository(RequestRepository):
    """Process-local store; requests live as long as the app does."""

    def __init__(self, requests: Iterable[ExtraRequest] = ()):
        self._lock = Lock()
        self._items: dict[int, ExtraRequest] = {}
        self._last_id = 0
        for r in requests:
            self.add(r)

    def next_id(self) -> int:
        with self._lock:
            self._last_id += 1
            return self._last_id

    def add(self, request: ExtraRequest) -> None:
        with self._lock:
            self._items[int(request.request_id)] = request
            self._last_id = max(self._last_id, int(request.request_id))

    def get(self, *, request_id: int) -> Optional[ExtraRequest]:
        return self._items.get(int(request_id))

    def modify(
        self,
        *,
        request_id: int,
        change: Callable[[ExtraRequest], ExtraRequest],
    ) -> Optional[ExtraRequest]:
        with self._lock:
            current = self._items.get(int(request_id))
            if current is None:
                return None
            updated = change(current)
            self._items[int(request_id)] = updated
            return updated

    def list_requests(
        self,
        *,
        status: Optional[RequestStatus] = None,
        sector: Optional[str] = None,
        limit: Optional[int] = 500,
    ) -> Sequence[ExtraRequest]:
        items = list(self._items.values())
        if status is not None:
            items = [r for r in items if r.status == status]
        if sector:
            items = [r for r in items if r.sector == sector]
        items.sort(key=lambda r: (r.created_at, r.request_id), reverse=True)
        return items if limit is None else items[: int(limit)]
