from __future__ import annotations

import logging
from datetime import date, datetime, time
from typing import Optional, Sequence

from ..common.datetime_utils import month_range, now_local
from ..common.validators import require_period
from ..core.constants import DEFAULT_CHECKOUT_CUTOFF
from ..core.enums import OvertimeAction
from ..core.exceptions import (
    AlreadyCheckedIn,
    AlreadyCheckedOut,
    EmployeeNotFound,
    NoAttendanceToday,
    NoCheckInToday,
    OutOfRange,
    OvertimeAlreadyCompleted,
    OvertimeAlreadyStarted,
    SiteNotConfigured,
    TooEarly,
)
from ..employees.repository import EmployeeRegistry
from ..geo.model import Coordinate, Site
from ..geo.validator import distance_meters, is_within_range
from .model import AttendanceDay, CheckOutResult, OvertimeResult
from .repository import AttendanceStore

logger = logging.getLogger(__name__)


class AttendanceService:
    """Use cases: check-in, check-out and overtime for the current day.

    Every operation is a single read-modify-write of one ``(employee_id, day)``
    record. Writes go through ``AttendanceStore.upsert`` and the stored record
    it returns is compared with what was written, so a concurrent writer that
    got there first surfaces as a state conflict instead of a lost update.
    """

    def __init__(
        self,
        attendance: AttendanceStore,
        employees: EmployeeRegistry | None = None,
        *,
        site: Site | None = None,
        checkout_cutoff: time = DEFAULT_CHECKOUT_CUTOFF,
    ):
        self._attendance = attendance
        self._employees = employees
        self._site = site
        self._cutoff = checkout_cutoff

    def _require_employee(self, employee_id: str) -> None:
        if self._employees is None:
            return
        if not self._employees.find_by_id(employee_id):
            raise EmployeeNotFound(employee_id)

    def check_in(
        self,
        employee_id: str,
        *,
        point: Coordinate,
        now: datetime | None = None,
        site: Site | None = None,
    ) -> AttendanceDay:
        now = now or now_local()
        today = now.date()
        site = site or self._site
        if site is None:
            raise SiteNotConfigured()

        point = Coordinate.checked(point.latitude, point.longitude)
        if not is_within_range(point, site):
            distance = distance_meters(point, site.center)
            logger.info(
                "check-in rejected for %s: %.1f m from site (radius %g m)", employee_id, distance, site.radius_m
            )
            raise OutOfRange(distance, site.radius_m)

        existing = self._attendance.find_by_employee_and_date(employee_id, today)
        if existing is not None and existing.check_in is not None:
            raise AlreadyCheckedIn(employee_id)

        self._require_employee(employee_id)

        day = existing or AttendanceDay(employee_id=employee_id, work_date=today)
        stored = self._attendance.upsert(day.with_check_in(now, point))
        if stored.check_in != now:
            raise AlreadyCheckedIn(employee_id)

        logger.info("check-in %s on %s at %s", employee_id, today, now.strftime("%H:%M:%S"))
        return stored

    def check_out(
        self,
        employee_id: str,
        *,
        now: datetime | None = None,
        point: Coordinate | None = None,
    ) -> CheckOutResult:
        now = now or now_local()
        today = now.date()

        if point is not None:
            point = Coordinate.checked(point.latitude, point.longitude)

        record = self._attendance.find_by_employee_and_date(employee_id, today)
        if record is None or record.check_in is None:
            raise NoCheckInToday(employee_id)
        if record.check_out is not None:
            raise AlreadyCheckedOut(employee_id)
        if now.time() < self._cutoff:
            logger.info(
                "check-out rejected for %s: %s is before cutoff %s",
                employee_id,
                now.strftime("%H:%M:%S"),
                self._cutoff.strftime("%H:%M"),
            )
            raise TooEarly(now, self._cutoff)

        stored = self._attendance.upsert(record.with_check_out(now, point))
        if stored.check_out != now:
            raise AlreadyCheckedOut(employee_id)

        hours = stored.worked_hours()
        logger.info("check-out %s on %s, worked %s h", employee_id, today, hours)
        return CheckOutResult(day=stored, hours_worked=hours)

    def _today_or_fail(self, employee_id: str, today: date) -> AttendanceDay:
        record = self._attendance.find_by_employee_and_date(employee_id, today)
        if record is None:
            raise NoAttendanceToday(employee_id)
        return record

    def start_overtime(self, employee_id: str, *, now: datetime | None = None) -> AttendanceDay:
        now = now or now_local()
        record = self._today_or_fail(employee_id, now.date())
        stored = self._attendance.upsert(record.with_overtime_started(now))
        if stored.overtime_start != now:
            raise OvertimeAlreadyStarted(employee_id)
        logger.info("overtime started for %s at %s", employee_id, now.strftime("%H:%M:%S"))
        return stored

    def end_overtime(self, employee_id: str, *, now: datetime | None = None) -> AttendanceDay:
        now = now or now_local()
        record = self._today_or_fail(employee_id, now.date())
        stored = self._attendance.upsert(record.with_overtime_ended(now))
        if stored.overtime_end != now:
            raise OvertimeAlreadyCompleted(employee_id)
        logger.info("overtime ended for %s, %s h", employee_id, stored.overtime_hours())
        return stored

    def toggle_overtime(self, employee_id: str, *, now: datetime | None = None) -> OvertimeResult:
        """Start overtime on the first call of the day, end it on the second.

        A third call fails with ``OvertimeAlreadyCompleted``.
        """
        now = now or now_local()
        record = self._today_or_fail(employee_id, now.date())
        action = record.next_overtime_action()
        if action is OvertimeAction.STARTED:
            return OvertimeResult(action=action, day=self.start_overtime(employee_id, now=now))
        return OvertimeResult(action=action, day=self.end_overtime(employee_id, now=now))

    def get_today_attendance(self, employee_id: str, *, now: datetime | None = None) -> Optional[AttendanceDay]:
        now = now or now_local()
        return self._attendance.find_by_employee_and_date(employee_id, now.date())

    def list_month(self, employee_id: str, year: int, month: int) -> Sequence[AttendanceDay]:
        year, month = require_period(year, month)
        start, end = month_range(year, month)
        days = self._attendance.find_by_employee_and_date_range(employee_id, start, end)
        return sorted(days, key=lambda d: d.work_date)
