from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import AttendanceAnalytics, AttendanceRecord, StudentAttendance


class AttendanceRepository(Protocol):
    def log(self, *, section_id: int) -> AttendanceRecord:
        """Record the current user's attendance for today."""

        raise NotImplementedError

    def list_for_section(self, section_id: int) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_for_section_on_date(self, section_id: int, day: date) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_for_student(self, student_id: int) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def get_student_attendance(self, *, student_id: int, section_id: int) -> Optional[StudentAttendance]:
        raise NotImplementedError

    def generate_qr(self, section_id: int) -> str:
        raise NotImplementedError

    def get_analytics(self, section_id: int) -> AttendanceAnalytics:
        raise NotImplementedError
