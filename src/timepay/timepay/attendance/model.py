from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from ..common.datetime_utils import elapsed_hours
from ..common.rounding import round_hours
from ..core.enums import AttendanceState, OvertimeAction, OvertimeState
from ..core.exceptions import (
    AlreadyCheckedIn,
    AlreadyCheckedOut,
    NoCheckInToday,
    OvertimeAlreadyCompleted,
    OvertimeAlreadyStarted,
    OvertimeNotStarted,
)
from ..geo.model import Coordinate


@dataclass(frozen=True)
class AttendanceDay:
    """One employee's attendance for one calendar day.

    The natural key is ``(employee_id, work_date)``. Instances are immutable;
    every transition returns a new value which the caller hands to the store.
    Timestamps that have been set are never cleared or overwritten.
    """

    employee_id: str
    work_date: date
    check_in: Optional[datetime] = None
    check_in_location: Optional[Coordinate] = None
    check_out: Optional[datetime] = None
    check_out_location: Optional[Coordinate] = None
    expected_end: Optional[datetime] = None
    overtime_start: Optional[datetime] = None
    overtime_end: Optional[datetime] = None
    overtime_closed: bool = False

    @property
    def key(self) -> tuple[str, date]:
        return self.employee_id, self.work_date

    @property
    def state(self) -> AttendanceState:
        if self.check_in is None:
            return AttendanceState.ABSENT
        if self.check_out is None:
            return AttendanceState.CHECKED_IN
        return AttendanceState.CHECKED_OUT

    @property
    def overtime_state(self) -> OvertimeState:
        if self.overtime_start is None:
            return OvertimeState.NONE
        if not self.overtime_closed:
            return OvertimeState.ACTIVE
        return OvertimeState.CLOSED

    @property
    def is_complete(self) -> bool:
        return self.check_in is not None and self.check_out is not None

    def worked_hours(self) -> Optional[Decimal]:
        """``check_out - check_in`` in hours, rounded to 2 decimals; None if incomplete."""
        if not self.is_complete:
            return None
        return round_hours(elapsed_hours(self.check_in, self.check_out))

    def overtime_hours(self) -> Optional[Decimal]:
        if self.overtime_start is None or self.overtime_end is None:
            return None
        return round_hours(elapsed_hours(self.overtime_start, self.overtime_end))

    # -- transitions -------------------------------------------------------

    def with_check_in(self, now: datetime, location: Coordinate) -> "AttendanceDay":
        if self.check_in is not None:
            raise AlreadyCheckedIn(self.employee_id)
        return replace(self, check_in=now, check_in_location=location)

    def with_check_out(self, now: datetime, location: Optional[Coordinate] = None) -> "AttendanceDay":
        if self.check_in is None:
            raise NoCheckInToday(self.employee_id)
        if self.check_out is not None:
            raise AlreadyCheckedOut(self.employee_id)
        return replace(self, check_out=now, check_out_location=location)

    def with_overtime_started(self, now: datetime) -> "AttendanceDay":
        if self.overtime_closed:
            raise OvertimeAlreadyCompleted(self.employee_id)
        if self.overtime_start is not None:
            raise OvertimeAlreadyStarted(self.employee_id)
        return replace(self, overtime_start=now)

    def with_overtime_ended(self, now: datetime) -> "AttendanceDay":
        if self.overtime_start is None:
            raise OvertimeNotStarted(self.employee_id)
        if self.overtime_end is not None or self.overtime_closed:
            raise OvertimeAlreadyCompleted(self.employee_id)
        return replace(self, overtime_end=now, overtime_closed=True)

    def next_overtime_action(self) -> OvertimeAction:
        """Which transition the overtime toggle performs next."""
        state = self.overtime_state
        if state is OvertimeState.NONE:
            return OvertimeAction.STARTED
        if state is OvertimeState.ACTIVE:
            return OvertimeAction.ENDED
        raise OvertimeAlreadyCompleted(self.employee_id)


@dataclass(frozen=True)
class CheckOutResult:
    day: AttendanceDay
    hours_worked: Decimal


@dataclass(frozen=True)
class OvertimeResult:
    action: OvertimeAction
    day: AttendanceDay
