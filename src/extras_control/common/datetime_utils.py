from __future__ import annotations

import re
from datetime import date, datetime
from typing import Optional, Union

_ISO_DATE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def try_parse_iso_date(value: Optional[str]) -> Optional[date]:
    """Like `parse_iso_date` but returns None for anything that is not YYYY-MM-DD."""
    if not value or not _ISO_DATE.fullmatch(value):
        return None
    try:
        return parse_iso_date(value)
    except ValueError:
        return None


def format_date_br(value: Union[date, str, None]) -> str:
    """dd/mm/yyyy, or "-" when the date is missing/invalid."""
    d = value if isinstance(value, date) else try_parse_iso_date(value)
    if d is None:
        return "-"
    return d.strftime("%d/%m/%Y")


def format_datetime_br(value: Optional[datetime]) -> str:
    if value is None:
        return "-"
    return value.strftime("%d/%m/%Y %H:%M")


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()
