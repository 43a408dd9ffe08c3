from __future__ import annotations

from dataclasses import dataclass
from datetime import time

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceStore
from .attendance.service import AttendanceService
from .core.constants import DEFAULT_CHECKOUT_CUTOFF
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRegistry
from .geo.model import Site
from .payroll.service import PayrollService


@dataclass(frozen=True)
class Container:
    attendance_repo: AttendanceStore
    employees_repo: EmployeeRegistry

    attendance_service: AttendanceService
    payroll_service: PayrollService


def build_services(
    attendance_repo: AttendanceStore,
    employees_repo: EmployeeRegistry,
    *,
    site: Site | None,
    checkout_cutoff: time = DEFAULT_CHECKOUT_CUTOFF,
) -> Container:
    """Wire services over any store implementation (MySQL in production, fakes in tests)."""
    attendance_service = AttendanceService(
        attendance_repo,
        employees_repo,
        site=site,
        checkout_cutoff=checkout_cutoff,
    )
    payroll_service = PayrollService(attendance_repo, employees_repo)

    return Container(
        attendance_repo=attendance_repo,
        employees_repo=employees_repo,
        attendance_service=attendance_service,
        payroll_service=payroll_service,
    )


def build_container(*, db_config: dict, site_config: dict, checkout_cutoff: time = DEFAULT_CHECKOUT_CUTOFF) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    return build_services(
        MySQLAttendanceRepository(conn),
        MySQLEmployeeRepository(conn),
        site=Site.from_config(site_config),
        checkout_cutoff=checkout_cutoff,
    )
