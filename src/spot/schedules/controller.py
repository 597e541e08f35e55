from __future__ import annotations

from flask import Flask

from ..common.web import current_role, current_user_id, login_required, payload, render, roles_required
from ..core.enums import Role
from ..container import Container

manager_required = roles_required(Role.TEACHER, Role.ADMIN, Role.SYSTEM_ADMIN)


def register(app: Flask, container: Container) -> None:
    def _log_change(section_id: int, message: str) -> None:
        container.activity_for(current_user_id()).log_schedule_change(
            section_name=f"Section #{section_id}",
            message=message,
            section_id=section_id,
        )

    @app.route("/sections/<int:section_id>/schedules", methods=["GET"], endpoint="section_schedules")
    @login_required
    def section_schedules(section_id: int):
        return render("schedules", schedules=container.schedule_service.list_for_section(section_id))

    @app.route("/sections/<int:section_id>/schedules", methods=["POST"], endpoint="schedule_create")
    @manager_required
    def schedule_create(section_id: int):
        data = payload()
        schedule = container.schedule_service.create(
            current_role=current_role(),
            section_id=section_id,
            day_of_week=data.get("day_of_week"),
            time_start=data.get("time_start", ""),
            time_end=data.get("time_end", ""),
            room=data.get("room"),
            schedule_type=data.get("schedule_type"),
        )
        _log_change(section_id, f"Schedule added for {schedule.day_name}")
        return render("schedules", 201, schedule=schedule)

    @app.route("/schedules/<int:schedule_id>", methods=["PUT", "POST"], endpoint="schedule_update")
    @manager_required
    def schedule_update(schedule_id: int):
        data = payload()
        schedule = container.schedule_service.update(
            current_role=current_role(),
            schedule_id=schedule_id,
            section_id=data.get("section_id"),
            day_of_week=data.get("day_of_week"),
            time_start=data.get("time_start", ""),
            time_end=data.get("time_end", ""),
            room=data.get("room"),
            schedule_type=data.get("schedule_type"),
        )
        _log_change(int(data["section_id"]), f"Schedule updated for {schedule.day_name}")
        return render("schedules", schedule=schedule)

    @app.route("/schedules/<int:schedule_id>", methods=["DELETE"], endpoint="schedule_delete")
    @manager_required
    def schedule_delete(schedule_id: int):
        container.schedule_service.delete(current_role=current_role(), schedule_id=schedule_id)
        return render("schedules", message="Schedule deleted")
