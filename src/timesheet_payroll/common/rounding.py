from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Union

Number = Union[int, float, Decimal]


def to_decimal(value: Number) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        # str() keeps 7.5 as 7.5 instead of its binary expansion
        return Decimal(str(value))
    return Decimal(value)


def round_half_up(value: Number) -> int:
    """Round to the nearest integer, halves away from zero (2.5 -> 3)."""
    return int(to_decimal(value).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def proportion(amount: Number, part: Number, whole: Number) -> int:
    """round(amount * part / whole); a zero whole resolves to 0 instead of raising."""
    whole = to_decimal(whole)
    if whole == 0:
        return 0
    return round_half_up(to_decimal(amount) * to_decimal(part) / whole)
