from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional


def _full_name(first: str, middle: Optional[str], last: str) -> str:
    if middle:
        return f"{first} {middle} {last}"
    return f"{first} {last}"


@dataclass(frozen=True)
class Student:
    _extra_json = ("full_name",)

    student_id: int
    first_name: str
    last_name: str
    email: str = ""
    physical_id: str = ""
    middle_name: Optional[str] = None
    year: str = ""
    program: str = ""
    google_linked: bool = False

    @property
    def full_name(self) -> str:
        return _full_name(self.first_name, self.middle_name, self.last_name)

    @classmethod
    def from_api(cls, r: Mapping[str, Any]) -> "Student":
        return cls(
            student_id=int(r["id"]),
            first_name=r.get("firstName") or "",
            last_name=r.get("lastName") or "",
            email=r.get("email") or "",
            physical_id=r.get("studentPhysicalId") or "",
            middle_name=r.get("middleName") or None,
            year=str(r.get("year") or ""),
            program=r.get("program") or "",
            google_linked=bool(r.get("googleLinked", False)),
        )


@dataclass(frozen=True)
class Teacher:
    _extra_json = ("full_name",)

    teacher_id: int
    first_name: str
    last_name: str
    email: str = ""
    physical_id: str = ""
    middle_name: Optional[str] = None
    google_linked: bool = False
    assigned_section_ids: tuple[int, ...] = field(default_factory=tuple)

    @property
    def full_name(self) -> str:
        return _full_name(self.first_name, self.middle_name, self.last_name)

    @classmethod
    def from_api(cls, r: Mapping[str, Any]) -> "Teacher":
        return cls(
            teacher_id=int(r["id"]),
            first_name=r.get("firstName") or "",
            last_name=r.get("lastName") or "",
            email=r.get("email") or "",
            physical_id=r.get("teacherPhysicalId") or "",
            middle_name=r.get("middleName") or None,
            google_linked=bool(r.get("googleLinked", False)),
            assigned_section_ids=tuple(int(x) for x in (r.get("assignedSectionIds") or [])),
        )


@dataclass(frozen=True)
class Admin:
    _extra_json = ("full_name",)

    admin_id: int
    first_name: str
    last_name: str
    email: str = ""
    middle_name: Optional[str] = None
    system_admin: bool = False

    @property
    def full_name(self) -> str:
        return _full_name(self.first_name, self.middle_name, self.last_name)

    @classmethod
    def from_api(cls, r: Mapping[str, Any]) -> "Admin":
        return cls(
            admin_id=int(r["id"]),
            first_name=r.get("firstName") or "",
            last_name=r.get("lastName") or "",
            email=r.get("email") or "",
            middle_name=r.get("middleName") or None,
            system_admin=bool(r.get("systemAdmin", False)),
        )
