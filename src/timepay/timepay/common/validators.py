from __future__ import annotations

import math
from numbers import Real

from ..core.constants import MAX_PAYROLL_YEAR, MIN_PAYROLL_YEAR
from ..core.exceptions import InvalidCoordinates, InvalidPeriod, ValidationError


def _is_number(value) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def require_coordinates(latitude, longitude) -> tuple[float, float]:
    """Reject anything outside latitude [-90, 90] / longitude [-180, 180]."""
    if not (_is_number(latitude) and _is_number(longitude)):
        raise InvalidCoordinates(latitude, longitude)
    lat, lng = float(latitude), float(longitude)
    if math.isnan(lat) or math.isnan(lng):
        raise InvalidCoordinates(latitude, longitude)
    if not (-90.0 <= lat <= 90.0 and -180.0 <= lng <= 180.0):
        raise InvalidCoordinates(latitude, longitude)
    return lat, lng


def require_period(year, month) -> tuple[int, int]:
    if not (isinstance(year, int) and not isinstance(year, bool)):
        raise InvalidPeriod(year, month)
    if not (isinstance(month, int) and not isinstance(month, bool)):
        raise InvalidPeriod(year, month)
    if not (MIN_PAYROLL_YEAR <= year <= MAX_PAYROLL_YEAR) or not (1 <= month <= 12):
        raise InvalidPeriod(year, month)
    return year, month


def require_non_negative(value, field_name: str) -> float:
    if not _is_number(value) or value < 0:
        raise ValidationError(f"{field_name} must be a non-negative number")
    return float(value)
