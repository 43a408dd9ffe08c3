from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import error_response, internal_error_response
from ..container import Container
from ..core.exceptions import DomainError, InvalidPeriod


def _period_from_args(args) -> tuple[int, int]:
    year, month = args.get("year"), args.get("month")
    try:
        return int(year), int(month)
    except (TypeError, ValueError):
        raise InvalidPeriod(year, month)


def register(app: Flask, container: Container) -> None:
    service = container.payroll_service

    @app.route("/api/payroll/all", methods=["GET"], endpoint="payroll_all")
    def payroll_all():
        try:
            year, month = _period_from_args(request.args)
            lines = service.build_monthly_report(year, month)
            return jsonify([line.to_dict() for line in lines])
        except DomainError as e:
            return error_response(e)
        except Exception:
            return internal_error_response("Internal server error occurred while fetching payroll data")

    @app.route("/api/payroll/<employee_id>", methods=["GET"], endpoint="payroll_employee")
    def payroll_employee(employee_id: str):
        try:
            year, month = _period_from_args(request.args)
            line = service.compute_monthly_payroll(employee_id, year, month)
            return jsonify(line.to_dict())
        except DomainError as e:
            return error_response(e)
        except Exception:
            return internal_error_response("Internal server error occurred while computing payroll")
