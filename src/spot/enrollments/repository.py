from __future__ import annotations

from typing import Protocol, Sequence

from .model import Enrollment


class EnrollmentRepository(Protocol):
    def enroll(self, enrollment_key: str) -> Enrollment:
        """Enroll the logged-in student into the section behind `enrollment_key`."""

        raise NotImplementedError

    def list_for_student(self, student_id: int) -> Sequence[Enrollment]:
        raise NotImplementedError

    def list_for_section(self, section_id: int) -> Sequence[Enrollment]:
        raise NotImplementedError

    def is_enrolled(self, *, student_id: int, section_id: int) -> bool:
        raise NotImplementedError
