from __future__ import annotations

from dataclasses import replace
from typing import Optional, Sequence

from ..common.validators import require_non_empty, require_positive_id
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, ValidationError
from ..schedules.model import Schedule
from ..schedules.repository import ScheduleRepository
from .model import Section
from .repository import SectionRepository

_ADMINS = (Role.ADMIN, Role.SYSTEM_ADMIN)


def schedule_text(schedules: Sequence[Schedule]) -> str:
    """One-line summary such as "Mon 7:30AM-9:00AM (LEC, NGE101)"."""

    if not schedules:
        return "No schedule"
    ordered = sorted(schedules, key=lambda s: (s.day_of_week, s.time_start))
    return ", ".join(s.label for s in ordered)


class SectionService:
    def __init__(self, sections: SectionRepository, schedules: ScheduleRepository):
        self._sections = sections
        self._schedules = schedules

    def list_for_course(self, course_id: int) -> Sequence[Section]:
        return self._sections.list_for_course(require_positive_id(course_id, "Course"))

    def list_for_teacher(self, teacher_id: int) -> Sequence[Section]:
        return self._sections.list_for_teacher(require_positive_id(teacher_id, "Teacher"))

    def list_all(self) -> Sequence[Section]:
        return self._sections.list_all()

    def get(self, section_id: int) -> Optional[Section]:
        return self._sections.get(require_positive_id(section_id, "Section"))

    def get_with_schedules(self, section_id: int) -> tuple[Section, Sequence[Schedule]]:
        section = self.get(section_id)
        if section is None:
            raise ValidationError("Section not found")
        schedules = self._schedules.list_for_section(section.section_id)
        rooms = [s.room for s in schedules if s.room and s.room != "No Room"]
        section = replace(
            section,
            schedule_text=schedule_text(schedules),
            room=section.room or (rooms[0] if rooms else None),
        )
        return section, schedules

    def find_by_enrollment_key(self, key: str) -> Optional[Section]:
        return self._sections.get_by_enrollment_key(require_non_empty(key, "Enrollment key"))

    def create(self, *, current_role: Role, course_id: int, section_name: str) -> Section:
        self._require_admin(current_role)
        return self._sections.create(
            {
                "courseId": require_positive_id(course_id, "Course"),
                "sectionName": require_non_empty(section_name, "Section name"),
            }
        )

    def update(
        self,
        *,
        current_role: Role,
        section_id: int,
        section_name: Optional[str] = None,
        enrollment_key: Optional[str] = None,
    ) -> Section:
        self._require_admin(current_role)
        payload: dict = {}
        if section_name is not None:
            payload["sectionName"] = require_non_empty(section_name, "Section name")
        if enrollment_key is not None:
            payload["enrollmentKey"] = require_non_empty(enrollment_key, "Enrollment key")
        if not payload:
            raise ValidationError("Nothing to update")
        return self._sections.update(require_positive_id(section_id, "Section"), payload)

    def delete(self, *, current_role: Role, section_id: int) -> None:
        self._require_admin(current_role)
        self._sections.delete(require_positive_id(section_id, "Section"))

    def assign_teacher(self, *, current_role: Role, section_id: int, teacher_id: int) -> None:
        self._require_admin(current_role)
        self._sections.assign_teacher(
            section_id=require_positive_id(section_id, "Section"),
            teacher_id=require_positive_id(teacher_id, "Teacher"),
        )

    def end_section(self, *, current_role: Role, section_id: int) -> None:
        self._require_admin(current_role)
        self._sections.end_section(require_positive_id(section_id, "Section"))

    def set_enrollment_open(self, *, current_role: Role, section_id: int, is_open: bool) -> None:
        if current_role not in (Role.TEACHER, *_ADMINS):
            raise AuthorizationError("You don't have permission to change enrollment")
        sid = require_positive_id(section_id, "Section")
        if is_open:
            self._sections.open_enrollment(sid)
        else:
            self._sections.close_enrollment(sid)

    @staticmethod
    def _require_admin(role: Role) -> None:
        if role not in _ADMINS:
            raise AuthorizationError("You don't have permission to manage sections")
