from __future__ import annotations

from flask import Flask

from ..common.web import (
    admin_required,
    current_role,
    current_user_id,
    payload,
    render,
    system_admin_required,
    teacher_required,
)
from ..core.exceptions import ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    users = container.user_service

    @app.route("/teacher/profile", endpoint="teacher_profile")
    @teacher_required
    def teacher_profile():
        teacher = users.current_teacher()
        if teacher is None:
            raise ValidationError("Teacher profile not found")
        return render("teacher_profile", teacher=teacher)

    # Students
    @app.route("/admin/students", methods=["GET"], endpoint="admin_students")
    @admin_required
    def admin_students():
        return render("admin_students", students=users.list_students())

    @app.route("/admin/students", methods=["POST"], endpoint="admin_student_create")
    @admin_required
    def admin_student_create():
        student = users.create_student(current_role=current_role(), form=payload())
        return render("admin_students", 201, student=student)

    @app.route("/admin/students/<int:student_id>", methods=["GET"], endpoint="admin_student_detail")
    @admin_required
    def admin_student_detail(student_id: int):
        student = users.get_student(student_id)
        if student is None:
            raise ValidationError("Student not found")
        return render("admin_students", student=student)

    @app.route("/admin/students/<int:student_id>", methods=["PUT", "POST"], endpoint="admin_student_update")
    @admin_required
    def admin_student_update(student_id: int):
        student = users.update_student(current_role=current_role(), student_id=student_id, form=payload())
        return render("admin_students", student=student)

    @app.route("/admin/students/<int:student_id>", methods=["DELETE"], endpoint="admin_student_delete")
    @admin_required
    def admin_student_delete(student_id: int):
        users.delete_student(current_role=current_role(), student_id=student_id)
        return render("admin_students", message="Student deleted")

    # Teachers
    @app.route("/admin/teachers", methods=["GET"], endpoint="admin_teachers")
    @admin_required
    def admin_teachers():
        return render("admin_teachers", teachers=users.list_teachers())

    @app.route("/admin/teachers", methods=["POST"], endpoint="admin_teacher_create")
    @admin_required
    def admin_teacher_create():
        teacher = users.create_teacher(current_role=current_role(), form=payload())
        return render("admin_teachers", 201, teacher=teacher)

    @app.route("/admin/teachers/<int:teacher_id>", methods=["PUT", "POST"], endpoint="admin_teacher_update")
    @admin_required
    def admin_teacher_update(teacher_id: int):
        teacher = users.update_teacher(current_role=current_role(), teacher_id=teacher_id, form=payload())
        return render("admin_teachers", teacher=teacher)

    @app.route(
        "/admin/teachers/<int:teacher_id>/assign/<int:section_id>",
        methods=["POST"],
        endpoint="admin_teacher_assign",
    )
    @admin_required
    def admin_teacher_assign(teacher_id: int, section_id: int):
        users.assign_teacher(current_role=current_role(), teacher_id=teacher_id, section_id=section_id)
        return render("admin_teachers", message="Teacher assigned")

    @app.route("/admin/teachers/<int:teacher_id>", methods=["DELETE"], endpoint="admin_teacher_delete")
    @admin_required
    def admin_teacher_delete(teacher_id: int):
        users.delete_teacher(current_role=current_role(), teacher_id=teacher_id)
        return render("admin_teachers", message="Teacher deleted")

    # Admins
    @app.route("/system-admin/admins", methods=["GET"], endpoint="system_admins")
    @system_admin_required
    def system_admins():
        return render("system_admins", admins=users.list_admins(current_role=current_role()))

    @app.route("/system-admin/admins", methods=["POST"], endpoint="system_admin_create")
    @system_admin_required
    def system_admin_create():
        admin = users.create_admin(current_role=current_role(), form=payload())
        return render("system_admins", 201, admin=admin)

    @app.route("/system-admin/admins/<int:admin_id>/promote", methods=["POST"], endpoint="system_admin_promote")
    @system_admin_required
    def system_admin_promote(admin_id: int):
        admin = users.set_system_admin(
            current_role=current_role(), current_user_id=current_user_id(), admin_id=admin_id, promote=True
        )
        return render("system_admins", admin=admin)

    @app.route("/system-admin/admins/<int:admin_id>/demote", methods=["POST"], endpoint="system_admin_demote")
    @system_admin_required
    def system_admin_demote(admin_id: int):
        admin = users.set_system_admin(
            current_role=current_role(), current_user_id=current_user_id(), admin_id=admin_id, promote=False
        )
        return render("system_admins", admin=admin)

    @app.route("/system-admin/admins/<int:admin_id>", methods=["DELETE"], endpoint="system_admin_delete")
    @system_admin_required
    def system_admin_delete(admin_id: int):
        users.delete_admin(current_role=current_role(), current_user_id=current_user_id(), admin_id=admin_id)
        return render("system_admins", message="Admin deleted")
