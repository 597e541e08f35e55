from __future__ import annotations

from flask import Flask

from ..common.web import current_user_id, payload, render_state, student_required
from ..container import Container
from .viewmodel import EnrollmentViewModel


def register(app: Flask, container: Container) -> None:
    def _vm() -> EnrollmentViewModel:
        user_id = current_user_id()
        return EnrollmentViewModel(
            container.enrollment_service,
            student_id=user_id,
            activity=container.activity_for(user_id),
        )

    @app.route("/classes", endpoint="classes")
    @student_required
    def classes():
        return render_state("classes", _vm().load_student_enrollments())

    @app.route("/classes/<int:section_id>/status", endpoint="class_status")
    @student_required
    def class_status(section_id: int):
        return render_state("class_status", _vm().check_status(section_id))

    @app.route("/enroll", methods=["POST"], endpoint="enroll")
    @student_required
    def enroll():
        vm = _vm()
        state = vm.enroll(payload().get("enrollment_key", ""))
        error_type = vm.last_error_type.value if vm.last_error_type else None
        return render_state("enroll", state, error_type=error_type)
