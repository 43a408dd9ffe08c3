from __future__ import annotations

from datetime import datetime, time
from typing import Iterable


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidCoordinates(ValidationError):
    def __init__(self, latitude, longitude):
        self.latitude = latitude
        self.longitude = longitude
        super().__init__(f"Invalid coordinates: latitude={latitude!r}, longitude={longitude!r}")


class InvalidPeriod(ValidationError):
    def __init__(self, year, month):
        self.year = year
        self.month = month
        super().__init__(
            f"Invalid payroll period {year!r}-{month!r}: year must be 2000-2100 and month 1-12"
        )


class StateConflictError(DomainError):
    """The operation is not legal in the current attendance state."""


class AlreadyCheckedIn(StateConflictError):
    def __init__(self, employee_id: str):
        self.employee_id = employee_id
        super().__init__("Already checked in today")


class AlreadyCheckedOut(StateConflictError):
    def __init__(self, employee_id: str):
        self.employee_id = employee_id
        super().__init__("Already checked out today")


class NoCheckInToday(StateConflictError):
    def __init__(self, employee_id: str):
        self.employee_id = employee_id
        super().__init__("No check-in recorded today")


class NoAttendanceToday(StateConflictError):
    def __init__(self, employee_id: str):
        self.employee_id = employee_id
        super().__init__("No attendance today")


class OvertimeNotStarted(StateConflictError):
    def __init__(self, employee_id: str):
        self.employee_id = employee_id
        super().__init__("Overtime has not been started")


class OvertimeAlreadyStarted(StateConflictError):
    def __init__(self, employee_id: str):
        self.employee_id = employee_id
        super().__init__("Overtime already started")


class OvertimeAlreadyCompleted(StateConflictError):
    def __init__(self, employee_id: str):
        self.employee_id = employee_id
        super().__init__("Overtime already completed")


class PolicyError(DomainError):
    """Business-rule rejection carrying diagnostic context."""


class OutOfRange(PolicyError):
    def __init__(self, distance_m: float, radius_m: float):
        self.distance_m = distance_m
        self.radius_m = radius_m
        super().__init__(
            f"You must be at the site location: {distance_m:.1f} m away, allowed radius is {radius_m:g} m"
        )


class TooEarly(PolicyError):
    def __init__(self, attempted_at: datetime, cutoff: time):
        self.attempted_at = attempted_at
        self.cutoff = cutoff
        super().__init__(
            f"Check-out is not allowed before {cutoff.strftime('%H:%M')} "
            f"(attempted at {attempted_at.strftime('%H:%M')})"
        )


class DataQualityError(DomainError):
    """Stored data is unusable for a computation."""


class MalformedEmployeeRecord(DataQualityError):
    def __init__(self, employee_id, missing_fields: Iterable[str]):
        self.employee_id = employee_id
        self.missing_fields = tuple(missing_fields)
        super().__init__(
            f"Employee {employee_id}: missing required fields ({', '.join(self.missing_fields)})"
        )


class NotFoundError(DomainError):
    pass


class EmployeeNotFound(NotFoundError):
    def __init__(self, employee_id):
        self.employee_id = employee_id
        super().__init__("Employee not found")


class ConfigurationError(DomainError):
    pass


class SiteNotConfigured(ConfigurationError):
    def __init__(self):
        super().__init__("Site location is not configured")
