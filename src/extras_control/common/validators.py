from __future__ import annotations

import math
import re
from typing import Optional

from ..core.exceptions import ValidationError

_TIME_OF_DAY = re.compile(r"[0-9]{1,2}:[0-9]{2}")


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} inválido")
    return value.strip()


def require_non_negative(value: float, field_name: str) -> float:
    if value is None or not math.isfinite(value) or value < 0:
        raise ValidationError(f"Campo inválido: {field_name} não pode ser negativo.")
    return value


def optional_text(value: Optional[str]) -> Optional[str]:
    return (value or "").strip() or None


def is_time_of_day(value: Optional[str]) -> bool:
    """True for `H:MM` / `HH:MM` strings (the only accepted clock format)."""
    return isinstance(value, str) and _TIME_OF_DAY.fullmatch(value) is not None
