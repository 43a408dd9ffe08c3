from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Optional

import pytest

from src.timepay.timepay.attendance.model import AttendanceDay
from src.timepay.timepay.attendance.service import AttendanceService
from src.timepay.timepay.core.enums import Role
from src.timepay.timepay.employees.model import Employee
from src.timepay.timepay.geo.model import Coordinate, Site
from src.timepay.timepay.payroll.service import PayrollService

SITE_CENTER = Coordinate(latitude=5.614818, longitude=-0.205874)


class InMemoryAttendance:
    """AttendanceStore fake with the same first-writer-wins upsert as the MySQL adapter."""

    def __init__(self, days=()):
        self._by_key: dict[tuple[str, date], AttendanceDay] = {}
        self.writes = 0
        for d in days:
            self._by_key[d.key] = d

    def find_by_employee_and_date(self, employee_id: str, work_date: date) -> Optional[AttendanceDay]:
        return self._by_key.get((employee_id, work_date))

    def find_by_employee_and_date_range(self, employee_id: str, start: date, end_exclusive: date):
        return [
            d
            for d in self._by_key.values()
            if d.employee_id == employee_id and start <= d.work_date < end_exclusive
        ]

    def upsert(self, day: AttendanceDay) -> AttendanceDay:
        self.writes += 1
        current = self._by_key.get(day.key)
        if current is None:
            self._by_key[day.key] = day
            return day

        merged = current
        if current.check_in is None:
            merged = replace(merged, check_in=day.check_in, check_in_location=day.check_in_location)
        if current.check_out is None and merged.check_in is not None:
            merged = replace(merged, check_out=day.check_out, check_out_location=day.check_out_location)
        if day.expected_end is not None:
            merged = replace(merged, expected_end=day.expected_end)
        if current.overtime_start is None:
            merged = replace(merged, overtime_start=day.overtime_start)
        if current.overtime_end is None and merged.overtime_start is not None:
            merged = replace(merged, overtime_end=day.overtime_end, overtime_closed=day.overtime_closed)
        self._by_key[day.key] = merged
        return merged


class InMemoryEmployees:
    def __init__(self, employees=()):
        self._employees = {e.employee_id: e for e in employees}

    def find_by_id(self, employee_id: str) -> Optional[Employee]:
        return self._employees.get(employee_id)

    def list_active(self):
        return [e for e in self._employees.values() if e.is_active]


def make_employee(employee_id: str = "emp-1", *, salary=125000, **overrides) -> Employee:
    fields = dict(employee_id=employee_id, name="Ama Mensah", role=Role.EMPLOYEE.value, base_salary=salary)
    fields.update(overrides)
    return Employee(**fields)


@pytest.fixture
def site() -> Site:
    return Site(center=SITE_CENTER, radius_m=50.0)


@pytest.fixture
def store() -> InMemoryAttendance:
    return InMemoryAttendance()


@pytest.fixture
def employees() -> InMemoryEmployees:
    return InMemoryEmployees([make_employee("emp-1"), make_employee("emp-2", name="Kofi Boateng")])


@pytest.fixture
def attendance_service(store, employees, site) -> AttendanceService:
    return AttendanceService(store, employees, site=site)


@pytest.fixture
def payroll_service(store, employees) -> PayrollService:
    return PayrollService(store, employees)


@pytest.fixture
def employee_factory():
    return make_employee


@pytest.fixture
def registry_factory():
    return InMemoryEmployees
