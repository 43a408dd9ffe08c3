from __future__ import annotations

import logging
from typing import Iterable, Optional

from ..attendance.repository import AttendanceStore
from ..common.datetime_utils import month_range
from ..common.validators import require_period
from ..core.exceptions import DataQualityError, EmployeeNotFound
from ..employees.model import Employee
from ..employees.repository import EmployeeRegistry
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import PayrollLine

logger = logging.getLogger(__name__)


class PayrollService:
    """Monthly payroll for one employee or for every active employee.

    Read-only over the attendance store: results are recomputed on every call
    and reflect whatever records the store returns at that moment.
    """

    def __init__(
        self,
        attendance: AttendanceStore,
        employees: EmployeeRegistry,
        *,
        calculator: Optional[PayrollCalculator] = None,
    ):
        self._attendance = attendance
        self._employees = employees
        self._calculator = calculator or StandardPayrollCalculator()

    def _line_for(self, employee: Employee, year: int, month: int) -> PayrollLine:
        start, end = month_range(year, month)
        days = self._attendance.find_by_employee_and_date_range(employee.employee_id, start, end)
        return self._calculator.compute(employee, days, year=year, month=month)

    def compute_monthly_payroll(self, employee_id: str, year: int, month: int) -> PayrollLine:
        year, month = require_period(year, month)
        employee = self._employees.find_by_id(employee_id)
        if not employee:
            raise EmployeeNotFound(employee_id)
        return self._line_for(employee, year, month)

    def build_monthly_report(
        self,
        year: int,
        month: int,
        employees: Optional[Iterable[Employee]] = None,
    ) -> list[PayrollLine]:
        """One PayrollLine per active employee, in the order employees are given.

        Employees with unusable records, or whose computation fails, are logged
        and left out; they never abort the report.
        """
        year, month = require_period(year, month)
        if employees is None:
            employees = self._employees.list_active()

        lines: list[PayrollLine] = []
        skipped = 0
        for employee in employees:
            if not employee.is_active:
                continue
            try:
                lines.append(self._line_for(employee, year, month))
            except DataQualityError as e:
                skipped += 1
                logger.warning("payroll %04d-%02d: skipping employee %s: %s", year, month, employee.employee_id, e)
            except Exception:
                skipped += 1
                logger.exception("payroll %04d-%02d: failed for employee %s", year, month, employee.employee_id)

        logger.info("payroll report %04d-%02d: %d lines, %d skipped", year, month, len(lines), skipped)
        return lines
