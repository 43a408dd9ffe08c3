from __future__ import annotations

import logging
from datetime import date, datetime

import pytest

from src.timepay.timepay.attendance.model import AttendanceDay
from src.timepay.timepay.core.exceptions import EmployeeNotFound, InvalidPeriod, MalformedEmployeeRecord
from src.timepay.timepay.payroll.calculator.standard_calculator import StandardPayrollCalculator
from src.timepay.timepay.payroll.service import PayrollService


def _worked(store, employee_id: str, d: date, hours: int):
    store.upsert(
        AttendanceDay(
            employee_id=employee_id,
            work_date=d,
            check_in=datetime(d.year, d.month, d.day, 8, 0),
            check_out=datetime(d.year, d.month, d.day, 8 + hours, 0),
        )
    )


def test_compute_monthly_payroll_reads_only_that_month(payroll_service, store):
    for day in range(1, 21):
        _worked(store, "emp-1", date(2025, 6, day), 9)
    _worked(store, "emp-1", date(2025, 7, 1), 9)
    _worked(store, "emp-2", date(2025, 6, 1), 9)

    line = payroll_service.compute_monthly_payroll("emp-1", 2025, 6)

    assert line.employee_id == "emp-1"
    assert line.employee_name == "Ama Mensah"
    assert (line.year, line.month) == (2025, 6)
    assert line.total_hours_worked == 180
    assert line.absence_hours == 60
    assert line.deduction_amount == 20000
    assert line.net_salary == 105000


def test_compute_monthly_payroll_unknown_employee(payroll_service):
    with pytest.raises(EmployeeNotFound):
        payroll_service.compute_monthly_payroll("ghost", 2025, 6)


def test_compute_monthly_payroll_malformed_employee(store, registry_factory, employee_factory):
    svc = PayrollService(store, registry_factory([employee_factory("emp-9", salary=None)]))
    with pytest.raises(MalformedEmployeeRecord):
        svc.compute_monthly_payroll("emp-9", 2025, 6)


class ExplodingRegistry:
    def find_by_id(self, employee_id):
        raise AssertionError("registry must not be read")

    def list_active(self):
        raise AssertionError("registry must not be read")


@pytest.mark.parametrize("year,month", [(1999, 6), (2101, 6), (2025, 0), (2025, 13)])
def test_invalid_period_fails_fast(store, year, month):
    svc = PayrollService(store, ExplodingRegistry())
    with pytest.raises(InvalidPeriod):
        svc.build_monthly_report(year, month)
    with pytest.raises(InvalidPeriod):
        svc.compute_monthly_payroll("emp-1", year, month)


def test_report_skips_malformed_record_and_keeps_the_rest(store, registry_factory, employee_factory, caplog):
    valid = [employee_factory(f"emp-{i}") for i in range(1, 4)]
    broken = employee_factory("emp-broken", name=None, base_salary="lots")
    registry = registry_factory([valid[0], broken, valid[1], valid[2]])
    svc = PayrollService(store, registry)

    with caplog.at_level(logging.WARNING):
        lines = svc.build_monthly_report(2025, 6)

    assert [line.employee_id for line in lines] == ["emp-1", "emp-2", "emp-3"]
    assert "emp-broken" in caplog.text


def test_report_keeps_insertion_order_and_skips_inactive(store, employee_factory, payroll_service):
    given = [
        employee_factory("emp-c"),
        employee_factory("emp-a"),
        employee_factory("emp-x", is_active=False),
        employee_factory("emp-b"),
    ]
    lines = payroll_service.build_monthly_report(2025, 6, given)
    assert [line.employee_id for line in lines] == ["emp-c", "emp-a", "emp-b"]


class FailingCalculator:
    def __init__(self, fail_for):
        self._fail_for = fail_for

    def compute(self, employee, days, *, year, month):
        if employee.employee_id == self._fail_for:
            raise RuntimeError("boom")
        return StandardPayrollCalculator().compute(employee, days, year=year, month=month)


def test_report_continues_past_unexpected_failure(store, employees):
    svc = PayrollService(store, employees, calculator=FailingCalculator("emp-1"))
    lines = svc.build_monthly_report(2025, 6)
    assert [line.employee_id for line in lines] == ["emp-2"]


def test_report_is_idempotent(payroll_service, store):
    for day in range(1, 11):
        _worked(store, "emp-1", date(2025, 6, day), 8)
        _worked(store, "emp-2", date(2025, 6, day), 7)

    first = payroll_service.build_monthly_report(2025, 6)
    second = payroll_service.build_monthly_report(2025, 6)

    assert first == second
    assert [line.total_hours_worked for line in first] == [80, 70]


def test_report_uses_registry_when_no_employees_given(payroll_service):
    lines = payroll_service.build_monthly_report(2025, 6)
    assert [line.employee_id for line in lines] == ["emp-1", "emp-2"]
    assert all(line.net_salary == 45000 for line in lines)
