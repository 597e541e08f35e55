from __future__ import annotations

from dataclasses import replace
from typing import Sequence

from ..common.validators import require_non_empty, require_positive_id
from ..schedules.repository import ScheduleRepository
from ..sections.service import schedule_text
from .model import Enrollment
from .repository import EnrollmentRepository


class EnrollmentService:
    def __init__(self, enrollments: EnrollmentRepository, schedules: ScheduleRepository):
        self._enrollments = enrollments
        self._schedules = schedules

    def enroll(self, enrollment_key: str) -> Enrollment:
        return self._enrollments.enroll(require_non_empty(enrollment_key, "Enrollment key"))

    def list_for_student(self, student_id: int) -> Sequence[Enrollment]:
        """Student's enrollments with each section's schedule text filled in."""

        out = []
        for e in self._enrollments.list_for_student(require_positive_id(student_id, "Student")):
            schedules = self._schedules.list_for_section(e.section.section_id)
            out.append(replace(e, section=replace(e.section, schedule_text=schedule_text(schedules))))
        return out

    def list_for_section(self, section_id: int) -> Sequence[Enrollment]:
        return self._enrollments.list_for_section(require_positive_id(section_id, "Section"))

    def is_enrolled(self, *, student_id: int, section_id: int) -> bool:
        return self._enrollments.is_enrolled(
            student_id=require_positive_id(student_id, "Student"),
            section_id=require_positive_id(section_id, "Section"),
        )
