from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Union

_UNIT = Decimal("1")


def to_decimal(value: Union[int, float, str, Decimal]) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        # go through str so 12.5 stays 12.5 rather than its binary approximation
        return Decimal(str(value))
    return Decimal(value)


def round_half_away(value: Decimal) -> int:
    """Round to a whole currency unit, halves away from zero (2.5 -> 3, -2.5 -> -3)."""
    return int(to_decimal(value).quantize(_UNIT, rounding=ROUND_HALF_UP))
