from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from ..core.constants import HOURS_DECIMAL_PLACES

_QUANT = Decimal(1).scaleb(-HOURS_DECIMAL_PLACES)


def round_hours(value: Decimal | float | int) -> Decimal:
    """Round to 2 decimals, halves away from zero (1.005 -> 1.01, -1.005 -> -1.01)."""
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return value.quantize(_QUANT, rounding=ROUND_HALF_UP)


def hours_to_float(value: Decimal) -> float:
    return float(round_hours(value))
