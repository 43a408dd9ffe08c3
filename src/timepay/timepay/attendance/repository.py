from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import AttendanceDay


class AttendanceStore(Protocol):
    """Storage port for AttendanceDay records, keyed by ``(employee_id, work_date)``.

    Note (DIP): the service depends on this interface, not on a concrete DB.
    Implementations must make ``upsert`` first-writer-wins for timestamps that
    are already set, and return the record as stored.
    """

    def find_by_employee_and_date(self, employee_id: str, work_date: date) -> Optional[AttendanceDay]:
        raise NotImplementedError

    def find_by_employee_and_date_range(
        self, employee_id: str, start: date, end_exclusive: date
    ) -> Sequence[AttendanceDay]:
        raise NotImplementedError

    def upsert(self, day: AttendanceDay) -> AttendanceDay:
        raise NotImplementedError
