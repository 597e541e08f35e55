from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping, Optional

from ..sections.model import Section
from ..users.model import Student


@dataclass(frozen=True)
class Enrollment:
    enrollment_id: int
    section: Section
    student: Optional[Student] = None
    enrolled_at: Optional[datetime] = None

    @classmethod
    def from_api(cls, r: Mapping[str, Any]) -> "Enrollment":
        enrolled_at = r.get("enrolledAt")
        return cls(
            enrollment_id=int(r["id"]),
            section=Section.from_api(r["section"]),
            student=Student.from_api(r["student"]) if isinstance(r.get("student"), dict) else None,
            enrolled_at=datetime.fromisoformat(enrolled_at) if enrolled_at else None,
        )
