from __future__ import annotations

from typing import Optional

from .enums import EnrollErrorType


class DomainError(Exception):
    """Base exception for client-side rule violations and API failures."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class InvalidQrCodeError(ValidationError):
    """Raised when a scanned payload is not `attend:<sectionId>`."""


class ApiError(DomainError):
    """Raised when a backend call fails."""

    def __init__(self, message: str, *, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class SessionExpiredError(ApiError):
    """Raised on HTTP 401 after stored credentials were cleared."""

    def __init__(self, message: str = "Authentication error: Please log in again"):
        super().__init__(message, status_code=401)


class DuplicateAttendanceError(ApiError):
    def __init__(self, message: str = "Attendance already recorded for today"):
        super().__init__(message, status_code=400)


class EnrollmentError(ApiError):
    def __init__(self, message: str, *, error_type: EnrollErrorType, status_code: Optional[int] = None):
        super().__init__(message, status_code=status_code)
        self.error_type = error_type
