from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class Course:
    course_id: int
    course_name: str
    course_code: str
    course_description: str = ""
    section_count: int = 0
    schedule: Optional[str] = None

    @classmethod
    def from_api(cls, r: Mapping[str, Any]) -> "Course":
        return cls(
            course_id=int(r["id"]),
            course_name=r.get("courseName") or "",
            course_code=r.get("courseCode") or "",
            course_description=r.get("courseDescription") or "",
            section_count=int(r.get("sectionCount") or 0),
            schedule=r.get("schedule"),
        )

