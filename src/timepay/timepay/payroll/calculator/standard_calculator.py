from __future__ import annotations

import logging
import math
from decimal import Decimal
from typing import Iterable

from ...attendance.model import AttendanceDay
from ...common.datetime_utils import month_range
from ...common.rounding import hours_to_float
from ...core.constants import DEDUCTION_BLOCK_HOURS, DEDUCTION_PER_BLOCK, EXPECTED_MONTHLY_HOURS
from ...core.exceptions import MalformedEmployeeRecord
from ...employees.model import Employee
from ..model import PayrollLine
from .base import PayrollCalculator

logger = logging.getLogger(__name__)


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: fixed expected hours, flat penalty per full block of absence.

    Worked hours are rounded per record and then summed (not rounded once at
    the end); reports produced elsewhere depend on exactly these figures.
    """

    def __init__(
        self,
        *,
        expected_hours: int = EXPECTED_MONTHLY_HOURS,
        block_hours: int = DEDUCTION_BLOCK_HOURS,
        penalty_per_block: int = DEDUCTION_PER_BLOCK,
    ):
        self._expected = Decimal(expected_hours)
        self._block = Decimal(block_hours)
        self._penalty = int(penalty_per_block)

    def total_hours_worked(self, days: Iterable[AttendanceDay], *, year: int, month: int) -> Decimal:
        start, end = month_range(year, month)
        total = Decimal(0)
        for day in days:
            if not (start <= day.work_date < end):
                continue
            hours = day.worked_hours()
            if hours is None:
                continue
            if hours < 0:
                logger.warning(
                    "ignoring attendance of %s on %s: check-out before check-in", day.employee_id, day.work_date
                )
                continue
            total += hours
        return total

    def deduction_for(self, absence_hours: Decimal) -> int:
        return math.floor(absence_hours / self._block) * self._penalty

    def compute(self, employee: Employee, days: Iterable[AttendanceDay], *, year: int, month: int) -> PayrollLine:
        missing = employee.missing_payroll_fields()
        if missing:
            raise MalformedEmployeeRecord(employee.employee_id, missing)

        worked = self.total_hours_worked(days, year=year, month=month)
        absence = max(Decimal(0), self._expected - worked)
        deduction = self.deduction_for(absence)
        net = max(0, employee.base_salary - deduction)

        return PayrollLine(
            employee_id=employee.employee_id,
            employee_name=employee.name,
            role=employee.role,
            year=year,
            month=month,
            base_salary=employee.base_salary,
            total_hours_worked=hours_to_float(worked),
            expected_hours=hours_to_float(self._expected),
            absence_hours=hours_to_float(absence),
            deduction_amount=deduction,
            net_salary=net,
        )
