from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal
from numbers import Real
from typing import Any, Optional


@dataclass(frozen=True)
class Employee:
    """Employee facts supplied by the employee registry.

    Fields are optional because registry rows are not guaranteed to be
    complete; payroll checks them with :meth:`missing_payroll_fields`.
    """

    employee_id: str
    name: Optional[str]
    role: Optional[str]
    base_salary: Any
    is_active: bool = True

    def missing_payroll_fields(self) -> list[str]:
        missing = []
        if not self.name or not str(self.name).strip():
            missing.append("name")
        if not self.role:
            missing.append("role")
        if not _is_amount(self.base_salary):
            missing.append("salary")
        return missing


def _is_amount(value) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, Decimal):
        return value.is_finite()
    return isinstance(value, Real) and math.isfinite(value)
