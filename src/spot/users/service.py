from __future__ import annotations

from typing import Optional, Sequence

from ..common.validators import require_min_length, require_non_empty, require_positive_id
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, ValidationError
from .model import Admin, Student, Teacher
from .repository import AdminRepository, StudentRepository, TeacherRepository

_ADMINS = (Role.ADMIN, Role.SYSTEM_ADMIN)


def _person_payload(form: dict, *, password_required: bool) -> dict:
    payload = {
        "firstName": require_non_empty(form.get("first_name", ""), "First name"),
        "middleName": (form.get("middle_name") or "").strip() or None,
        "lastName": require_non_empty(form.get("last_name", ""), "Last name"),
        "email": require_non_empty(form.get("email", ""), "Email"),
    }
    if "@" not in payload["email"]:
        raise ValidationError("Email is invalid")
    password = form.get("password")
    if password_required or password:
        payload["password"] = require_min_length(password or "", "Password", 6)
    return payload


class UserService:
    """Use case: manage students, teachers and admins (admin screens)."""

    def __init__(self, students: StudentRepository, teachers: TeacherRepository, admins: AdminRepository):
        self._students = students
        self._teachers = teachers
        self._admins = admins

    # Students
    def list_students(self) -> Sequence[Student]:
        return self._students.list_all()

    def get_student(self, student_id: int) -> Optional[Student]:
        return self._students.get(require_positive_id(student_id, "Student"))

    def create_student(self, *, current_role: Role, form: dict) -> Student:
        self._require_admin(current_role)
        payload = _person_payload(form, password_required=True)
        payload["studentPhysicalId"] = require_non_empty(form.get("physical_id", ""), "Student ID")
        payload["year"] = (form.get("year") or "").strip()
        payload["program"] = (form.get("program") or "").strip()
        return self._students.create(payload)

    def update_student(self, *, current_role: Role, student_id: int, form: dict) -> Student:
        self._require_admin(current_role)
        payload = _person_payload(form, password_required=False)
        if form.get("physical_id"):
            payload["studentPhysicalId"] = form["physical_id"].strip()
        payload["year"] = (form.get("year") or "").strip()
        payload["program"] = (form.get("program") or "").strip()
        return self._students.update(require_positive_id(student_id, "Student"), payload)

    def delete_student(self, *, current_role: Role, student_id: int) -> None:
        self._require_admin(current_role)
        self._students.delete(require_positive_id(student_id, "Student"))

    # Teachers
    def list_teachers(self) -> Sequence[Teacher]:
        return self._teachers.list_all()

    def get_teacher(self, teacher_id: int) -> Optional[Teacher]:
        return self._teachers.get(require_positive_id(teacher_id, "Teacher"))

    def current_teacher(self) -> Optional[Teacher]:
        return self._teachers.get_current()

    def create_teacher(self, *, current_role: Role, form: dict) -> Teacher:
        self._require_admin(current_role)
        payload = _person_payload(form, password_required=True)
        payload["teacherPhysicalId"] = require_non_empty(form.get("physical_id", ""), "Teacher ID")
        return self._teachers.create(payload)

    def update_teacher(self, *, current_role: Role, teacher_id: int, form: dict) -> Teacher:
        self._require_admin(current_role)
        payload = _person_payload(form, password_required=False)
        if form.get("physical_id"):
            payload["teacherPhysicalId"] = form["physical_id"].strip()
        return self._teachers.update(require_positive_id(teacher_id, "Teacher"), payload)

    def assign_teacher(self, *, current_role: Role, teacher_id: int, section_id: int) -> None:
        self._require_admin(current_role)
        self._teachers.assign_to_section(
            teacher_id=require_positive_id(teacher_id, "Teacher"),
            section_id=require_positive_id(section_id, "Section"),
        )

    def delete_teacher(self, *, current_role: Role, teacher_id: int) -> None:
        self._require_admin(current_role)
        self._teachers.delete(require_positive_id(teacher_id, "Teacher"))

    # Admins (system admin only)
    def list_admins(self, *, current_role: Role) -> Sequence[Admin]:
        self._require_system_admin(current_role)
        return self._admins.list_all()

    def create_admin(self, *, current_role: Role, form: dict) -> Admin:
        self._require_system_admin(current_role)
        return self._admins.create(_person_payload(form, password_required=True))

    def set_system_admin(self, *, current_role: Role, current_user_id: int, admin_id: int, promote: bool) -> Admin:
        self._require_system_admin(current_role)
        target = require_positive_id(admin_id, "Admin")
        if not promote and target == int(current_user_id):
            raise ValidationError("You cannot demote yourself")
        return self._admins.promote(target) if promote else self._admins.demote(target)

    def delete_admin(self, *, current_role: Role, current_user_id: int, admin_id: int) -> None:
        self._require_system_admin(current_role)
        target = require_positive_id(admin_id, "Admin")
        if target == int(current_user_id):
            raise ValidationError("You cannot delete your own account")
        self._admins.delete(target)

    @staticmethod
    def _require_admin(role: Role) -> None:
        if role not in _ADMINS:
            raise AuthorizationError("You don't have permission")

    @staticmethod
    def _require_system_admin(role: Role) -> None:
        if role != Role.SYSTEM_ADMIN:
            raise AuthorizationError("Only system administrators can manage admins")
