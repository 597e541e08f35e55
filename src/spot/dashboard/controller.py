from __future__ import annotations

from flask import Flask

from ..common.web import current_role, current_user_id, login_required, render
from ..core.enums import Role
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/dashboard", endpoint="dashboard")
    @login_required
    def dashboard():
        role = current_role()
        user_id = current_user_id()
        service = container.dashboard_service
        if role == Role.STUDENT:
            data = service.for_student(user_id)
        elif role == Role.TEACHER:
            data = service.for_teacher(user_id)
        else:
            data = service.for_admin()
        return render(
            "dashboard",
            role=role,
            unread_notifications=container.notification_service.unread_count(user_id),
            data=data,
        )
