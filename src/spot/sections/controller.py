from __future__ import annotations

from flask import Flask

from ..common.web import (
    admin_required,
    current_role,
    current_user_id,
    int_field,
    login_required,
    payload,
    render,
    render_state,
    roles_required,
    teacher_required,
)
from ..core.enums import Role
from ..container import Container
from .viewmodel import SectionsViewModel


def register(app: Flask, container: Container) -> None:
    @app.route("/sections/<int:section_id>", endpoint="section_detail")
    @login_required
    def section_detail(section_id: int):
        vm = SectionsViewModel(container.section_service)
        return render_state("section_detail", vm.load_detail(section_id))

    @app.route("/teacher/sections", endpoint="teacher_sections")
    @teacher_required
    def teacher_sections():
        vm = SectionsViewModel(container.section_service)
        return render_state("teacher_sections", vm.load_for_teacher(current_user_id()))

    @app.route("/admin/sections", methods=["GET"], endpoint="admin_sections")
    @admin_required
    def admin_sections():
        vm = SectionsViewModel(container.section_service)
        return render_state("admin_sections", vm.load_all())

    @app.route("/admin/sections", methods=["POST"], endpoint="admin_section_create")
    @admin_required
    def admin_section_create():
        data = payload()
        section = container.section_service.create(
            current_role=current_role(),
            course_id=int_field(data, "course_id"),
            section_name=data.get("section_name", ""),
        )
        return render("admin_sections", 201, section=section)

    @app.route("/admin/sections/<int:section_id>", methods=["PUT", "POST"], endpoint="admin_section_update")
    @admin_required
    def admin_section_update(section_id: int):
        data = payload()
        section = container.section_service.update(
            current_role=current_role(),
            section_id=section_id,
            section_name=data.get("section_name"),
            enrollment_key=data.get("enrollment_key"),
        )
        return render("admin_sections", section=section)

    @app.route("/admin/sections/<int:section_id>", methods=["DELETE"], endpoint="admin_section_delete")
    @admin_required
    def admin_section_delete(section_id: int):
        container.section_service.delete(current_role=current_role(), section_id=section_id)
        return render("admin_sections", message="Section deleted")

    @app.route("/admin/sections/<int:section_id>/assign", methods=["POST"], endpoint="admin_section_assign")
    @admin_required
    def admin_section_assign(section_id: int):
        container.section_service.assign_teacher(
            current_role=current_role(), section_id=section_id, teacher_id=int_field(payload(), "teacher_id")
        )
        return render("admin_sections", message="Teacher assigned")

    @app.route("/admin/sections/<int:section_id>/end", methods=["POST"], endpoint="admin_section_end")
    @admin_required
    def admin_section_end(section_id: int):
        container.section_service.end_section(current_role=current_role(), section_id=section_id)
        return render("admin_sections", message="Section ended")

    @app.route(
        "/sections/<int:section_id>/enrollment",
        methods=["POST"],
        endpoint="section_enrollment_toggle",
    )
    @roles_required(Role.TEACHER, Role.ADMIN, Role.SYSTEM_ADMIN)
    def section_enrollment_toggle(section_id: int):
        data = payload()
        is_open = str(data.get("open", "")).lower() in {"1", "true", "yes", "on"}
        container.section_service.set_enrollment_open(
            current_role=current_role(), section_id=section_id, is_open=is_open
        )
        section = container.section_service.get(section_id)
        if section:
            state = "opened" if is_open else "closed"
            container.activity_for(current_user_id()).log_section_info(
                section_name=section.display_name, message=f"Enrollment {state}", section_id=section_id
            )
        return render("section_detail", section=section)
