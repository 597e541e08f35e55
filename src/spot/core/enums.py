from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User type as issued by the backend on login."""

    STUDENT = "STUDENT"
    TEACHER = "TEACHER"
    ADMIN = "ADMIN"
    SYSTEM_ADMIN = "SYSTEM_ADMIN"

    @classmethod
    def parse(cls, value: str | None) -> "Role":
        text = (value or "").strip().upper().replace("-", "_")
        try:
            return cls(text)
        except ValueError:
            return cls.STUDENT


class AttendanceStatus(str, Enum):
    """Status shown for one calendar day."""

    PRESENT = "PRESENT"
    LATE = "LATE"
    ABSENT = "ABSENT"
    NO_CLASS = "NO_CLASS"


class SeatCellState(str, Enum):
    MINE = "MINE"
    TAKEN = "TAKEN"
    AVAILABLE = "AVAILABLE"


class ScheduleType(str, Enum):
    LEC = "LEC"
    LAB = "LAB"
    REC = "REC"


class NotificationType(str, Enum):
    SEAT_PLAN = "SEAT_PLAN"
    ATTENDANCE = "ATTENDANCE"
    ENROLLMENT = "ENROLLMENT"
    PROFILE_UPDATE = "PROFILE_UPDATE"
    COURSE = "COURSE"
    SECTION = "SECTION"
    SCHEDULE = "SCHEDULE"
    SYSTEM = "SYSTEM"


class EnrollErrorType(str, Enum):
    """Why an enrollment attempt failed, for specific feedback on screen."""

    GENERAL = "GENERAL"
    DUPLICATE_SECTION = "DUPLICATE_SECTION"
    DUPLICATE_COURSE = "DUPLICATE_COURSE"
    INVALID_KEY = "INVALID_KEY"
    CLOSED_ENROLLMENT = "CLOSED_ENROLLMENT"
    NETWORK_ERROR = "NETWORK_ERROR"
