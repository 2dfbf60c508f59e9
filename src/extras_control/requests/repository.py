from __future__ import annotations

from typing import Callable, Optional, Protocol, Sequence

from ..core.enums import RequestStatus
from .model import ExtraRequest


class RequestRepository(Protocol):
    def next_id(self) -> int:
        raise NotImplementedError

    def add(self, request: ExtraRequest) -> None:
        raise NotImplementedError

    def get(self, *, request_id: int) -> Optional[ExtraRequest]:
        raise NotImplementedError

    def modify(
        self,
        *,
        request_id: int,
        change: Callable[[ExtraRequest], ExtraRequest],
    ) -> Optional[ExtraRequest]:
        """Read, change and store one request atomically.

        `change` receives the current request and returns its replacement; any
        exception it raises aborts the write. None if the id is unknown.
        """

        raise NotImplementedError

    def list_requests(
        self,
        *,
        status: Optional[RequestStatus] = None,
        sector: Optional[str] = None,
        limit: Optional[int] = 500,
    ) -> Sequence[ExtraRequest]:
        """Newest first. `limit=None` returns every match."""

        raise NotImplementedError
