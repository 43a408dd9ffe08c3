"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from datetime import time

EARTH_RADIUS_M = 6_371_000

DEFAULT_CHECKOUT_CUTOFF = time(18, 0)

# 30 working days x 8 hours, not derived from the calendar.
EXPECTED_MONTHLY_HOURS = 240
DEDUCTION_BLOCK_HOURS = 60
DEDUCTION_PER_BLOCK = 20_000

MIN_PAYROLL_YEAR = 2000
MAX_PAYROLL_YEAR = 2100

HOURS_DECIMAL_PLACES = 2

# Registry default when an employee is created without an explicit salary.
DEFAULT_SALARY_BY_ROLE = {
    "employee": 125_000,
    "superior": 225_000,
    "admin": 125_000,
}
