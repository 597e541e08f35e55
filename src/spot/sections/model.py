from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..courses.model import Course
from ..users.model import Teacher


@dataclass(frozen=True)
class Section:
    """One scheduled instance of a course, owned by at most one teacher."""

    _extra_json = ("course_name", "instructor_name", "display_name", "teacher_id")

    section_id: int
    section_name: str
    course: Optional[Course] = None
    course_id: Optional[int] = None
    teacher: Optional[Teacher] = None
    enrollment_key: Optional[str] = None
    enrollment_open: bool = False
    enrollment_count: int = 0
    room: Optional[str] = None
    schedule_text: Optional[str] = None

    @property
    def course_name(self) -> str:
        return self.course.course_name if self.course else ""

    @property
    def instructor_name(self) -> str:
        return self.teacher.full_name if self.teacher else "Not Assigned"

    @property
    def teacher_id(self) -> Optional[int]:
        return self.teacher.teacher_id if self.teacher else None

    @property
    def display_name(self) -> str:
        return self.section_name or self.course_name or f"Section #{self.section_id}"

    @classmethod
    def from_api(cls, r: Mapping[str, Any]) -> "Section":
        course = Course.from_api(r["course"]) if isinstance(r.get("course"), dict) else None
        teacher = Teacher.from_api(r["teacher"]) if isinstance(r.get("teacher"), dict) else None
        course_id = course.course_id if course else r.get("courseId")
        return cls(
            section_id=int(r["id"]),
            section_name=r.get("sectionName") or "",
            course=course,
            course_id=int(course_id) if course_id is not None else None,
            teacher=teacher,
            enrollment_key=r.get("enrollmentKey"),
            enrollment_open=bool(r.get("enrollmentOpen", False)),
            enrollment_count=max(0, int(r.get("enrollmentCount") or 0)),
            room=r.get("room"),
            schedule_text=r.get("schedule"),
        )
