"""Rounding rules used by payroll and hour displays."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal

from ..core.constants import MONEY_ROUND_UP_CENTS


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def round_money(value: float) -> int:
    """Settle a monetary amount to an even whole-currency value.

    Cents >= 56 round up, anything below rounds down; an odd result is then
    bumped to the next even number. Ex: 100.56 -> 102, 100.55 -> 100,
    127.05 -> 128, 123.50 -> 124.
    """
    if value is None or not math.isfinite(value):
        return 0
    whole = math.floor(value)
    cents = round_half_up((value - whole) * 100)
    result = whole + 1 if cents >= MONEY_ROUND_UP_CENTS else whole
    if result % 2 != 0:
        result += 1
    return int(result)


def _round_decimal(value: float, exponent: str) -> Decimal:
    return Decimal(repr(value)).quantize(Decimal(exponent), rounding=ROUND_HALF_UP)


def round_hours_to_integer(hours: float) -> int:
    """Ex: 7.4 -> 7; 7.5 -> 8 (half away from zero)."""
    if not math.isfinite(hours):
        return 0
    return int(_round_decimal(hours, "1"))


def round_hours_to_one_decimal(hours: float) -> float:
    """Ex: 7.34 -> 7.3; 7.35 -> 7.4."""
    if not math.isfinite(hours):
        return 0.0
    return float(_round_decimal(hours, "0.1"))
