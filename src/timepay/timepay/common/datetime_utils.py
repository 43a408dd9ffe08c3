from __future__ import annotations

from datetime import date, datetime, time, timedelta
from decimal import Decimal


def parse_hh_mm(value: str) -> time:
    """Parse HH:MM string into time."""
    return datetime.strptime(value.strip(), "%H:%M").time()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def month_range(year: int, month: int) -> tuple[date, date]:
    """Return ``[first day of month, first day of next month)``."""
    start = date(year, month, 1)
    if month == 12:
        return start, date(year + 1, 1, 1)
    return start, date(year, month + 1, 1)


def elapsed_hours(start: datetime, end: datetime) -> Decimal:
    """Exact elapsed hours between two timestamps (not rounded)."""
    delta: timedelta = end - start
    micros = (delta.days * 86_400 + delta.seconds) * 1_000_000 + delta.microseconds
    return Decimal(micros) / Decimal(3_600_000_000)
