from __future__ import annotations

from datetime import date
from typing import Iterable, Optional

from ..common.datetime_utils import try_parse_iso_date
from ..requests.model import ExtraRequest, WorkDay


def day_in_range(day: WorkDay, start: Optional[date], end: Optional[date]) -> bool:
    d = try_parse_iso_date(day.date)
    if d is None:
        return False
    return (start is None or d >= start) and (end is None or d <= end)


def filter_requests(
    requests: Iterable[ExtraRequest],
    *,
    start: Optional[date] = None,
    end: Optional[date] = None,
    sector: Optional[str] = None,
) -> list[ExtraRequest]:
    """Keep requests with at least one work day in [start, end] and, optionally, of one sector."""
    out = list(requests)
    if start or end:
        out = [r for r in out if any(day_in_range(d, start, end) for d in r.work_days)]
    if sector:
        out = [r for r in out if r.sector == sector]
    return out
