from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Section


class SectionRepository(Protocol):
    def list_for_course(self, course_id: int) -> Sequence[Section]:
        raise NotImplementedError

    def list_for_teacher(self, teacher_id: int) -> Sequence[Section]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Section]:
        raise NotImplementedError

    def get(self, section_id: int) -> Optional[Section]:
        raise NotImplementedError

    def get_by_enrollment_key(self, key: str) -> Optional[Section]:
        raise NotImplementedError

    def create(self, payload: dict) -> Section:
        raise NotImplementedError

    def update(self, section_id: int, payload: dict) -> Section:
        raise NotImplementedError

    def delete(self, section_id: int) -> None:
        raise NotImplementedError

    def assign_teacher(self, *, section_id: int, teacher_id: int) -> None:
        raise NotImplementedError

    def end_section(self, section_id: int) -> None:
        raise NotImplementedError

    def open_enrollment(self, section_id: int) -> None:
        raise NotImplementedError

    def close_enrollment(self, section_id: int) -> None:
        raise NotImplementedError
