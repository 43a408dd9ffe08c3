from __future__ import annotations

from datetime import date
from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from ..geo.model import Coordinate
from .model import AttendanceDay
from .repository import AttendanceStore

_COLUMNS = """
    employee_id, work_date,
    check_in, check_in_lat, check_in_lng,
    check_out, check_out_lat, check_out_lng,
    expected_end, overtime_start, overtime_end, overtime_closed
"""


def _location(lat, lng) -> Optional[Coordinate]:
    if lat is None or lng is None:
        return None
    return Coordinate(latitude=float(lat), longitude=float(lng))


def _row_to_day(r: Dict[str, Any]) -> AttendanceDay:
    return AttendanceDay(
        employee_id=str(r["employee_id"]),
        work_date=r["work_date"],
        check_in=r.get("check_in"),
        check_in_location=_location(r.get("check_in_lat"), r.get("check_in_lng")),
        check_out=r.get("check_out"),
        check_out_location=_location(r.get("check_out_lat"), r.get("check_out_lng")),
        expected_end=r.get("expected_end"),
        overtime_start=r.get("overtime_start"),
        overtime_end=r.get("overtime_end"),
        overtime_closed=bool(r.get("overtime_closed") or 0),
    )


class MySQLAttendanceRepository(AttendanceStore):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def find_by_employee_and_date(self, employee_id: str, work_date: date) -> Optional[AttendanceDay]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_days
                WHERE employee_id=%s AND work_date=%s
                """,
                (employee_id, work_date),
            )
            r = fetchone(cur)
            return _row_to_day(r) if r else None

    def find_by_employee_and_date_range(
        self, employee_id: str, start: date, end_exclusive: date
    ) -> Sequence[AttendanceDay]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_days
                WHERE employee_id=%s AND work_date >= %s AND work_date < %s
                ORDER BY work_date ASC
                """,
                (employee_id, start, end_exclusive),
            )
            return [_row_to_day(r) for r in fetchall(cur)]

    def upsert(self, day: AttendanceDay) -> AttendanceDay:
        # Timestamps already stored win over incoming ones (first writer wins).
        # MySQL applies assignments left to right, so each location column is
        # updated before the timestamp it is guarded by.
        in_loc = day.check_in_location
        out_loc = day.check_out_location
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance_days (
                    employee_id, work_date,
                    check_in, check_in_lat, check_in_lng,
                    check_out, check_out_lat, check_out_lng,
                    expected_end, overtime_start, overtime_end, overtime_closed
                )
                VALUES (%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s) AS new
                ON DUPLICATE KEY UPDATE
                    check_in_lat = IF(check_in IS NULL, new.check_in_lat, check_in_lat),
                    check_in_lng = IF(check_in IS NULL, new.check_in_lng, check_in_lng),
                    check_in = COALESCE(check_in, new.check_in),
                    check_out_lat = IF(check_out IS NULL AND check_in IS NOT NULL, new.check_out_lat, check_out_lat),
                    check_out_lng = IF(check_out IS NULL AND check_in IS NOT NULL, new.check_out_lng, check_out_lng),
                    check_out = IF(check_out IS NULL AND check_in IS NOT NULL, new.check_out, check_out),
                    expected_end = COALESCE(new.expected_end, expected_end),
                    overtime_start = COALESCE(overtime_start, new.overtime_start),
                    overtime_closed = IF(overtime_end IS NULL AND overtime_start IS NOT NULL, new.overtime_closed, overtime_closed),
                    overtime_end = IF(overtime_end IS NULL AND overtime_start IS NOT NULL, new.overtime_end, overtime_end)
                """,
                (
                    day.employee_id,
                    day.work_date,
                    day.check_in,
                    in_loc.latitude if in_loc else None,
                    in_loc.longitude if in_loc else None,
                    day.check_out,
                    out_loc.latitude if out_loc else None,
                    out_loc.longitude if out_loc else None,
                    day.expected_end,
                    day.overtime_start,
                    day.overtime_end,
                    int(day.overtime_closed),
                ),
            )
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_days
                WHERE employee_id=%s AND work_date=%s
                """,
                (day.employee_id, day.work_date),
            )
            return _row_to_day(fetchone(cur))
