from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict

from ..attendance.repository import AttendanceRepository
from ..core.exceptions import DomainError, SessionExpiredError
from ..courses.repository import CourseRepository
from ..enrollments.service import EnrollmentService
from ..sections.repository import SectionRepository
from ..users.repository import StudentRepository, TeacherRepository

logger = logging.getLogger(__name__)


@dataclass
class DashboardData:
    """Whatever could be loaded, plus one error message per part that failed."""

    parts: Dict[str, Any] = field(default_factory=dict)
    errors: Dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {**self.parts, "errors": dict(self.errors)}


class DashboardService:
    """Aggregates several resources; each fetch is isolated from the others."""

    def __init__(
        self,
        *,
        courses: CourseRepository,
        sections: SectionRepository,
        students: StudentRepository,
        teachers: TeacherRepository,
        attendance: AttendanceRepository,
        enrollments: EnrollmentService,
    ):
        self._courses = courses
        self._sections = sections
        self._students = students
        self._teachers = teachers
        self._attendance = attendance
        self._enrollments = enrollments

    @staticmethod
    def _collect(data: DashboardData, name: str, fetch: Callable[[], Any], default: Any) -> None:
        try:
            data.parts[name] = fetch()
        except SessionExpiredError:
            raise
        except DomainError as e:
            logger.error("Dashboard part %s failed: %s", name, e)
            data.parts[name] = default
            data.errors[name] = str(e)

    def for_student(self, student_id: int) -> DashboardData:
        data = DashboardData()
        self._collect(data, "enrollments", lambda: list(self._enrollments.list_for_student(student_id)), [])
        self._collect(data, "recent_attendance", lambda: list(self._attendance.list_for_student(student_id))[:10], [])
        return data

    def for_teacher(self, teacher_id: int) -> DashboardData:
        data = DashboardData()
        self._collect(data, "sections", lambda: list(self._sections.list_for_teacher(teacher_id)), [])
        sections = data.parts["sections"]
        self._collect(
            data,
            "total_students",
            lambda: sum(s.enrollment_count for s in sections),
            0,
        )
        return data

    def for_admin(self) -> DashboardData:
        data = DashboardData()
        self._collect(data, "courses", lambda: list(self._courses.list_all()), [])
        self._collect(data, "sections", lambda: list(self._sections.list_all()), [])
        self._collect(data, "students", lambda: list(self._students.list_all()), [])
        self._collect(data, "teachers", lambda: list(self._teachers.list_all()), [])
        data.parts["counts"] = {
            "courses": len(data.parts["courses"]),
            "sections": len(data.parts["sections"]),
            "students": len(data.parts["students"]),
            "teachers": len(data.parts["teachers"]),
        }
        return data
