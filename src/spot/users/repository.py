from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Admin, Student, Teacher


class StudentRepository(Protocol):
    def list_all(self) -> Sequence[Student]:
        raise NotImplementedError

    def get(self, student_id: int) -> Optional[Student]:
        raise NotImplementedError

    def create(self, payload: dict) -> Student:
        raise NotImplementedError

    def update(self, student_id: int, payload: dict) -> Student:
        raise NotImplementedError

    def delete(self, student_id: int) -> None:
        raise NotImplementedError


class TeacherRepository(Protocol):
    def list_all(self) -> Sequence[Teacher]:
        raise NotImplementedError

    def get(self, teacher_id: int) -> Optional[Teacher]:
        raise NotImplementedError

    def get_current(self) -> Optional[Teacher]:
        """Profile of the logged-in teacher."""

        raise NotImplementedError

    def create(self, payload: dict) -> Teacher:
        raise NotImplementedError

    def update(self, teacher_id: int, payload: dict) -> Teacher:
        raise NotImplementedError

    def assign_to_section(self, *, teacher_id: int, section_id: int) -> None:
        raise NotImplementedError

    def delete(self, teacher_id: int) -> None:
        raise NotImplementedError


class AdminRepository(Protocol):
    def list_all(self) -> Sequence[Admin]:
        raise NotImplementedError

    def create(self, payload: dict) -> Admin:
        raise NotImplementedError

    def promote(self, admin_id: int) -> Admin:
        raise NotImplementedError

    def demote(self, admin_id: int) -> Admin:
        raise NotImplementedError

    def delete(self, admin_id: int) -> None:
        raise NotImplementedError
