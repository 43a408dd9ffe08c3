from __future__ import annotations

from dataclasses import asdict, dataclass
from decimal import Decimal
from typing import Any, Optional


def _money(value):
    # DECIMAL columns arrive as Decimal; JSON clients expect plain numbers.
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    return value


@dataclass(frozen=True)
class PayrollLine:
    """Derived monthly pay figures for one employee. Never stored."""

    employee_id: str
    employee_name: Optional[str]
    role: Optional[str]
    year: int
    month: int
    base_salary: Any
    total_hours_worked: float
    expected_hours: float
    absence_hours: float
    deduction_amount: int
    net_salary: Any

    def to_dict(self) -> dict:
        data = asdict(self)
        data["base_salary"] = _money(self.base_salary)
        data["net_salary"] = _money(self.net_salary)
        return data
