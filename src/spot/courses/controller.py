from __future__ import annotations

from flask import Flask

from ..common.web import admin_required, current_role, current_user_id, login_required, payload, render
from ..core.exceptions import ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/courses", endpoint="courses")
    @login_required
    def courses():
        return render("courses", courses=container.course_service.list_all())

    @app.route("/admin/courses", methods=["POST"], endpoint="admin_course_create")
    @admin_required
    def admin_course_create():
        data = payload()
        course = container.course_service.create(
            current_role=current_role(),
            course_name=data.get("course_name", ""),
            course_code=data.get("course_code", ""),
            course_description=data.get("course_description", ""),
        )
        container.activity_for(current_user_id()).log_course_info(
            course_name=course.course_name, message="Course created", course_id=course.course_id
        )
        return render("courses", 201, course=course)

    @app.route("/admin/courses/<int:course_id>", methods=["GET"], endpoint="admin_course_detail")
    @admin_required
    def admin_course_detail(course_id: int):
        course = container.course_service.get(course_id)
        if course is None:
            raise ValidationError("Course not found")
        return render(
            "course_detail", course=course, sections=container.section_service.list_for_course(course_id)
        )

    @app.route("/admin/courses/<int:course_id>", methods=["PUT", "POST"], endpoint="admin_course_update")
    @admin_required
    def admin_course_update(course_id: int):
        data = payload()
        course = container.course_service.update(
            current_role=current_role(),
            course_id=course_id,
            course_name=data.get("course_name", ""),
            course_code=data.get("course_code", ""),
            course_description=data.get("course_description", ""),
        )
        return render("courses", course=course)

    @app.route("/admin/courses/<int:course_id>", methods=["DELETE"], endpoint="admin_course_delete")
    @admin_required
    def admin_course_delete(course_id: int):
        container.course_service.delete(current_role=current_role(), course_id=course_id)
        return render("courses", message="Course deleted")
