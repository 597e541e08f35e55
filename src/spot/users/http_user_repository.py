from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..core.exceptions import ApiError, SessionExpiredError
from ..http.base import as_dict, as_list, list_or_empty
from ..http.client import ApiClient
from .model import Admin, Student, Teacher
from .repository import AdminRepository, StudentRepository, TeacherRepository

logger = logging.getLogger(__name__)


def _required(data, what: str) -> dict:
    r = as_dict(data)
    if r is None:
        raise ApiError(f"Failed to save {what}")
    return r


class HttpStudentRepository(StudentRepository):
    def __init__(self, client: ApiClient):
        self._client = client

    @list_or_empty
    def list_all(self) -> Sequence[Student]:
        return [Student.from_api(r) for r in as_list(self._client.get("/admin/students"))]

    def get(self, student_id: int) -> Optional[Student]:
        r = as_dict(self._client.get(f"/admin/students/{int(student_id)}"))
        return Student.from_api(r) if r else None

    def create(self, payload: dict) -> Student:
        return Student.from_api(_required(self._client.post("/admin/create-student", json=payload), "student"))

    def update(self, student_id: int, payload: dict) -> Student:
        return Student.from_api(_required(self._client.put(f"/students/{int(student_id)}", json=payload), "student"))

    def delete(self, student_id: int) -> None:
        self._client.delete(f"/admin/students/{int(student_id)}")


class HttpTeacherRepository(TeacherRepository):
    def __init__(self, client: ApiClient):
        self._client = client

    @list_or_empty
    def list_all(self) -> Sequence[Teacher]:
        # System admins see every teacher; plain admins fall back to their own listing.
        try:
            data = self._client.get("/system-admin/teachers")
        except SessionExpiredError:
            raise
        except ApiError as e:
            logger.info("Falling back to admin endpoint for teachers: %s", e)
            data = self._client.get("/admin/teachers")
        return [Teacher.from_api(r) for r in as_list(data)]

    def get(self, teacher_id: int) -> Optional[Teacher]:
        r = as_dict(self._client.get(f"/admin/teachers/{int(teacher_id)}"))
        return Teacher.from_api(r) if r else None

    def get_current(self) -> Optional[Teacher]:
        r = as_dict(self._client.get("/teacher-profile/me"))
        return Teacher.from_api(r) if r else None

    def create(self, payload: dict) -> Teacher:
        return Teacher.from_api(_required(self._client.post("/admin/create-teacher", json=payload), "teacher"))

    def update(self, teacher_id: int, payload: dict) -> Teacher:
        return Teacher.from_api(_required(self._client.put(f"/teachers/{int(teacher_id)}", json=payload), "teacher"))

    def assign_to_section(self, *, teacher_id: int, section_id: int) -> None:
        self._client.post(f"/teachers/{int(teacher_id)}/assign/{int(section_id)}")

    def delete(self, teacher_id: int) -> None:
        self._client.delete(f"/admin/teachers/{int(teacher_id)}")


class HttpAdminRepository(AdminRepository):
    def __init__(self, client: ApiClient):
        self._client = client

    @list_or_empty
    def list_all(self) -> Sequence[Admin]:
        return [Admin.from_api(r) for r in as_list(self._client.get("/system-admin/admins"))]

    def create(self, payload: dict) -> Admin:
        return Admin.from_api(_required(self._client.post("/system-admin/create-admin", json=payload), "admin"))

    def promote(self, admin_id: int) -> Admin:
        return Admin.from_api(_required(self._client.put(f"/system-admin/promote/{int(admin_id)}"), "admin"))

    def demote(self, admin_id: int) -> Admin:
        return Admin.from_api(_required(self._client.put(f"/system-admin/demote/{int(admin_id)}"), "admin"))

    def delete(self, admin_id: int) -> None:
        self._client.delete(f"/system-admin/admin/{int(admin_id)}")
