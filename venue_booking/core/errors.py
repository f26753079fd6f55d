"""Booking admission failures.

Every failure carries the HTTP status it maps to and a human readable
message. ``payload`` holds extra keys merged into the JSON error body
(e.g. the conflicting booking for a 409).
"""
from typing import Any, Dict, Optional


class BookingError(Exception):
    status_code = 500

    def __init__(self, message: str, payload: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.payload = payload or {}

    def to_dict(self) -> Dict[str, Any]:
        return {"message": self.message, **self.payload}


class ValidationFailed(BookingError):
    status_code = 400

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field


class NotFound(BookingError):
    status_code = 404


class Forbidden(BookingError):
    status_code = 403


class BookingConflict(BookingError):
    status_code = 409


class InternalError(BookingError):
    status_code = 500


class Unauthorized(BookingError):
    status_code = 401
