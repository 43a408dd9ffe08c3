from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Employee role as stored by the employee registry."""

    EMPLOYEE = "employee"
    SUPERIOR = "superior"
    ADMIN = "admin"


class AttendanceState(str, Enum):
    """Base check-in/check-out cycle of one attendance day."""

    ABSENT = "ABSENT"
    CHECKED_IN = "CHECKED_IN"
    CHECKED_OUT = "CHECKED_OUT"


class OvertimeState(str, Enum):
    NONE = "NONE"
    ACTIVE = "ACTIVE"
    CLOSED = "CLOSED"


class OvertimeAction(str, Enum):
    """What a call to the overtime toggle did."""

    STARTED = "started"
    ENDED = "ended"
