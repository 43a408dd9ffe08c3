from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Employee
from .repository import EmployeeRegistry


def _row_to_employee(row: Dict[str, Any]) -> Employee:
    # Rows are passed through as-is; incomplete ones are rejected by payroll.
    return Employee(
        employee_id=str(row["employee_id"]),
        name=row.get("name"),
        role=row.get("role"),
        base_salary=row.get("salary"),
        is_active=bool(row.get("is_active", True)),
    )


class MySQLEmployeeRepository(EmployeeRegistry):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def find_by_id(self, employee_id: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_id, name, role, salary, is_active
                FROM employees
                WHERE employee_id=%s
                """,
                (employee_id,),
            )
            row = fetchone(cur)
            return _row_to_employee(row) if row else None

    def list_active(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_id, name, role, salary, is_active
                FROM employees
                WHERE is_active=1
                ORDER BY created_at ASC, employee_id ASC
                """
            )
            return [_row_to_employee(r) for r in fetchall(cur)]
