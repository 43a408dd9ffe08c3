from datetime import date, datetime, timedelta
from decimal import Decimal

import pytest

from src.timepay.timepay.attendance.model import AttendanceDay
from src.timepay.timepay.core.exceptions import MalformedEmployeeRecord
from src.timepay.timepay.payroll.calculator.standard_calculator import StandardPayrollCalculator


def _day(d: date, hours: float, *, employee_id="emp-1", start_hour=8) -> AttendanceDay:
    check_in = datetime(d.year, d.month, d.day, start_hour, 0)
    return AttendanceDay(
        employee_id=employee_id,
        work_date=d,
        check_in=check_in,
        check_out=check_in + timedelta(hours=hours),
    )


def _month_of(hours_per_day: float, days: int, year=2025, month=6):
    return [_day(date(year, month, i + 1), hours_per_day) for i in range(days)]


def test_no_attendance_gives_full_deduction(employee_factory):
    line = StandardPayrollCalculator().compute(employee_factory(salary=125000), [], year=2025, month=6)

    assert line.total_hours_worked == 0
    assert line.expected_hours == 240
    assert line.absence_hours == 240
    assert line.deduction_amount == 80000
    assert line.net_salary == 45000


def test_full_month_has_no_deduction(employee_factory):
    line = StandardPayrollCalculator().compute(employee_factory(salary=125000), _month_of(10, 25), year=2025, month=6)

    assert line.total_hours_worked == 250
    assert line.absence_hours == 0
    assert line.deduction_amount == 0
    assert line.net_salary == 125000


@pytest.mark.parametrize(
    "absence,deduction",
    [("59", 0), ("59.99", 0), ("60", 20000), ("119.99", 20000), ("120", 40000), ("240", 80000)],
)
def test_deduction_steps_per_full_60_hour_block(absence, deduction):
    assert StandardPayrollCalculator().deduction_for(Decimal(absence)) == deduction


@pytest.mark.parametrize("worked,deduction", [(181, 0), (180, 20000), (180.5, 0), (121, 20000)])
def test_deduction_from_worked_hours(employee_factory, worked, deduction):
    # A single long record is enough: only check_out - check_in matters.
    line = StandardPayrollCalculator().compute(employee_factory(), [_day(date(2025, 6, 1), worked)], year=2025, month=6)
    assert line.deduction_amount == deduction


def test_net_salary_never_negative(employee_factory):
    line = StandardPayrollCalculator().compute(employee_factory(salary=50000), [], year=2025, month=6)
    assert line.deduction_amount == 80000
    assert line.net_salary == 0


def test_sum_of_rounded_hours_not_rounded_sum(employee_factory):
    # 20 minutes = 0.3333 h -> 0.33 per record; three records sum to 0.99, not 1.00
    d = date(2025, 6, 2)
    days = [
        AttendanceDay(
            employee_id="emp-1",
            work_date=d.replace(day=d.day + i),
            check_in=datetime(2025, 6, 2 + i, 8, 0),
            check_out=datetime(2025, 6, 2 + i, 8, 20),
        )
        for i in range(3)
    ]
    calc = StandardPayrollCalculator()
    assert calc.total_hours_worked(days, year=2025, month=6) == Decimal("0.99")

    line = calc.compute(employee_factory(), days, year=2025, month=6)
    assert line.total_hours_worked == 0.99
    assert line.absence_hours == 239.01


def test_only_complete_days_inside_the_month_count(employee_factory):
    days = [
        _day(date(2025, 6, 10), 8),
        AttendanceDay(employee_id="emp-1", work_date=date(2025, 6, 11), check_in=datetime(2025, 6, 11, 8, 0)),
        _day(date(2025, 5, 31), 8),
        _day(date(2025, 7, 1), 8),
    ]
    line = StandardPayrollCalculator().compute(employee_factory(), days, year=2025, month=6)
    assert line.total_hours_worked == 8


def test_check_out_before_check_in_is_ignored(employee_factory):
    bad = AttendanceDay(
        employee_id="emp-1",
        work_date=date(2025, 6, 3),
        check_in=datetime(2025, 6, 3, 18, 0),
        check_out=datetime(2025, 6, 3, 8, 0),
    )
    line = StandardPayrollCalculator().compute(employee_factory(), [bad, _day(date(2025, 6, 4), 8)], year=2025, month=6)
    assert line.total_hours_worked == 8


def test_decimal_salary_from_registry(employee_factory):
    line = StandardPayrollCalculator().compute(employee_factory(salary=Decimal("125000.00")), [], year=2025, month=6)
    assert line.net_salary == Decimal("45000.00")


@pytest.mark.parametrize(
    "overrides,missing",
    [
        ({"name": None}, ("name",)),
        ({"role": ""}, ("role",)),
        ({"base_salary": "125000"}, ("salary",)),
        ({"base_salary": None, "name": "  "}, ("name", "salary")),
        ({"base_salary": True}, ("salary",)),
    ],
)
def test_malformed_employee_is_rejected(employee_factory, overrides, missing):
    with pytest.raises(MalformedEmployeeRecord) as exc:
        StandardPayrollCalculator().compute(employee_factory(**overrides), [], year=2025, month=6)
    assert exc.value.missing_fields == missing


def test_policy_values_are_configurable(employee_factory):
    calc = StandardPayrollCalculator(expected_hours=160, block_hours=40, penalty_per_block=1000)
    line = calc.compute(employee_factory(salary=10000), [], year=2025, month=6)
    assert line.deduction_amount == 4000
    assert line.net_salary == 6000
