from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable

from ...attendance.model import AttendanceDay
from ...employees.model import Employee
from ..model import PayrollLine


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def compute(self, employee: Employee, days: Iterable[AttendanceDay], *, year: int, month: int) -> PayrollLine:
        raise NotImplementedError
