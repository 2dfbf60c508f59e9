"""Worked-time accounting over portaria clock records.

Every function here is total: missing or malformed `HH:MM` values count as
"no data" and yield 0 / "" instead of raising.
"""

from __future__ import annotations

import math
from typing import Iterable, Optional

from ..common.validators import is_time_of_day
from ..core.constants import MINUTES_PER_DAY
from ..requests.model import TimeRecord, WorkDay
from .rounding import round_half_up, round_hours_to_one_decimal


def time_to_minutes(value: Optional[str]) -> Optional[int]:
    """Minutes since midnight for `H:MM`/`HH:MM`, None otherwise."""
    if not is_time_of_day(value):
        return None
    hours, minutes = value.split(":")
    return int(hours) * 60 + int(minutes)


def break_minutes(record: TimeRecord) -> int:
    start = time_to_minutes(record.break_start)
    end = time_to_minutes(record.break_end)
    if start is None or end is None or end <= start:
        return 0
    return end - start


def minutes_worked_in_day(record: Optional[TimeRecord]) -> int:
    if record is None:
        return 0
    arrival = time_to_minutes(record.arrival)
    departure = time_to_minutes(record.departure)
    if arrival is None or departure is None:
        return 0

    # Departure before arrival means the shift crossed midnight.
    if departure < arrival:
        departure += MINUTES_PER_DAY

    return max(0, departure - arrival - break_minutes(record))


def minutes_to_hhmm(total_minutes: float) -> str:
    # A remainder >= 59.5 renders as "HH:60"; printed receipts already carry it.
    if total_minutes is None or not math.isfinite(total_minutes) or total_minutes <= 0:
        return ""
    hours = math.floor(total_minutes / 60)
    minutes = round_half_up(total_minutes % 60)
    return f"{hours:02d}:{minutes:02d}"


def total_minutes_worked(work_days: Iterable[WorkDay]) -> int:
    return sum(minutes_worked_in_day(day.time_record) for day in work_days)


def total_hours_worked(work_days: Iterable[WorkDay]) -> str:
    return minutes_to_hhmm(total_minutes_worked(work_days))


def hours_worked_label(record: Optional[TimeRecord]) -> str:
    """One-decimal label in pt-BR style, e.g. "7,3h"."""
    minutes = minutes_worked_in_day(record)
    if minutes <= 0:
        return ""
    hours = round_hours_to_one_decimal(minutes / 60)
    return f"{hours:.1f}".replace(".", ",") + "h"
