from __future__ import annotations

import logging

from flask import jsonify

from ..core.exceptions import (
    ConfigurationError,
    DataQualityError,
    DomainError,
    NotFoundError,
    PolicyError,
    StateConflictError,
    ValidationError,
)

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR = (
    (ValidationError, 400),
    (PolicyError, 403),
    (NotFoundError, 404),
    (StateConflictError, 409),
    (DataQualityError, 422),
    (ConfigurationError, 503),
)


def status_for(exc: DomainError) -> int:
    for error_type, status in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status
    return 400


def error_response(exc: DomainError):
    body = {"success": False, "error": type(exc).__name__, "message": str(exc)}
    # Policy rejections carry the measured values so the UI can explain them.
    for attr in ("distance_m", "radius_m"):
        if hasattr(exc, attr):
            body[attr] = round(getattr(exc, attr), 1)
    if hasattr(exc, "cutoff"):
        body["cutoff"] = exc.cutoff.strftime("%H:%M")
    return jsonify(body), status_for(exc)


def internal_error_response(message: str):
    logger.exception(message)
    return jsonify({"success": False, "message": message}), 500
