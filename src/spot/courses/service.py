from __future__ import annotations

from typing import Optional, Sequence

from ..common.validators import require_non_empty, require_positive_id
from ..core.enums import Role
from ..core.exceptions import AuthorizationError
from .model import Course
from .repository import CourseRepository

_ADMINS = (Role.ADMIN, Role.SYSTEM_ADMIN)


class CourseService:
    def __init__(self, courses: CourseRepository):
        self._courses = courses

    def list_all(self) -> Sequence[Course]:
        return sorted(self._courses.list_all(), key=lambda c: c.course_code)

    def get(self, course_id: int) -> Optional[Course]:
        return self._courses.get(require_positive_id(course_id, "Course"))

    def create(self, *, current_role: Role, course_name: str, course_code: str, course_description: str = "") -> Course:
        self._require_admin(current_role)
        return self._courses.create(self._payload(course_name, course_code, course_description))

    def update(
        self,
        *,
        current_role: Role,
        course_id: int,
        course_name: str,
        course_code: str,
        course_description: str = "",
    ) -> Course:
        self._require_admin(current_role)
        return self._courses.update(
            require_positive_id(course_id, "Course"), self._payload(course_name, course_code, course_description)
        )

    def delete(self, *, current_role: Role, course_id: int) -> None:
        self._require_admin(current_role)
        self._courses.delete(require_positive_id(course_id, "Course"))

    @staticmethod
    def _require_admin(role: Role) -> None:
        if role not in _ADMINS:
            raise AuthorizationError("You don't have permission to manage courses")

    @staticmethod
    def _payload(course_name: str, course_code: str, course_description: str) -> dict:
        return {
            "courseName": require_non_empty(course_name, "Course name"),
            "courseCode": require_non_empty(course_code, "Course code").upper(),
            "courseDescription": (course_description or "").strip(),
        }
