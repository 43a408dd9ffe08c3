from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import error_response, internal_error_response
from ..container import Container
from ..core.exceptions import DomainError, InvalidCoordinates, InvalidPeriod
from ..geo.model import Coordinate
from .model import AttendanceDay


def _ts(value):
    return value.isoformat() if value else None


def _location(coord):
    if coord is None:
        return None
    return {"latitude": coord.latitude, "longitude": coord.longitude}


def day_to_json(day: AttendanceDay) -> dict:
    worked = day.worked_hours()
    overtime = day.overtime_hours()
    return {
        "employee_id": day.employee_id,
        "date": day.work_date.strftime("%Y-%m-%d"),
        "state": day.state.value,
        "check_in": _ts(day.check_in),
        "check_in_location": _location(day.check_in_location),
        "check_out": _ts(day.check_out),
        "check_out_location": _location(day.check_out_location),
        "expected_end": _ts(day.expected_end),
        "overtime_start": _ts(day.overtime_start),
        "overtime_end": _ts(day.overtime_end),
        "overtime_checked_out": day.overtime_closed,
        "overtime_state": day.overtime_state.value,
        "hours_worked": float(worked) if worked is not None else None,
        "overtime_hours": float(overtime) if overtime is not None else None,
    }


def _point_from_json(data: dict, *, required: bool):
    lat = data.get("latitude")
    lng = data.get("longitude")
    if lat is None and lng is None and not required:
        return None
    if lat is None or lng is None:
        raise InvalidCoordinates(lat, lng)
    return Coordinate.checked(lat, lng)


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service

    @app.route("/api/attendance/<employee_id>/check-in", methods=["POST"], endpoint="attendance_check_in")
    def check_in(employee_id: str):
        try:
            point = _point_from_json(request.get_json(silent=True) or {}, required=True)
            day = service.check_in(employee_id, point=point)
            return jsonify({"success": True, "message": "Checked in", "attendance": day_to_json(day)}), 201
        except DomainError as e:
            return error_response(e)
        except Exception:
            return internal_error_response("Unexpected error during check-in")

    @app.route("/api/attendance/<employee_id>/check-out", methods=["POST"], endpoint="attendance_check_out")
    def check_out(employee_id: str):
        try:
            point = _point_from_json(request.get_json(silent=True) or {}, required=False)
            result = service.check_out(employee_id, point=point)
            return jsonify(
                {
                    "success": True,
                    "message": "Checked out",
                    "hours_worked": float(result.hours_worked),
                    "attendance": day_to_json(result.day),
                }
            )
        except DomainError as e:
            return error_response(e)
        except Exception:
            return internal_error_response("Unexpected error during check-out")

    @app.route("/api/attendance/<employee_id>/overtime", methods=["POST"], endpoint="attendance_overtime")
    def overtime(employee_id: str):
        try:
            result = service.toggle_overtime(employee_id)
            return jsonify(
                {
                    "success": True,
                    "action": result.action.value,
                    "message": f"Overtime {result.action.value}",
                    "attendance": day_to_json(result.day),
                }
            )
        except DomainError as e:
            return error_response(e)
        except Exception:
            return internal_error_response("Unexpected error during overtime")

    @app.route("/api/attendance/<employee_id>/today", methods=["GET"], endpoint="attendance_today")
    def today(employee_id: str):
        try:
            day = service.get_today_attendance(employee_id)
            return jsonify(day_to_json(day) if day else None)
        except DomainError as e:
            return error_response(e)
        except Exception:
            return internal_error_response("Unexpected error loading today's attendance")

    @app.route("/api/attendance/<employee_id>/month", methods=["GET"], endpoint="attendance_month")
    def month(employee_id: str):
        try:
            year, month = request.args.get("year"), request.args.get("month")
            try:
                year, month = int(year), int(month)
            except (TypeError, ValueError):
                raise InvalidPeriod(year, month)
            days = service.list_month(employee_id, year, month)
            return jsonify([day_to_json(day) for day in days])
        except DomainError as e:
            return error_response(e)
        except Exception:
            return internal_error_response("Unexpected error loading monthly attendance")
