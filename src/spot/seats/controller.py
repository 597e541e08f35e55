from __future__ import annotations

from flask import Flask

from ..common.web import (
    current_role,
    current_user_id,
    int_field,
    login_required,
    payload,
    render,
    render_state,
    roles_required,
    student_required,
)
from ..core.enums import Role
from ..core.state import Error
from ..container import Container
from .grid import seat_display_id
from .viewmodel import SeatViewModel


def register(app: Flask, container: Container) -> None:
    def _vm() -> SeatViewModel:
        user_id = current_user_id()
        role = current_role()
        return SeatViewModel(
            container.seat_service,
            container.seats_repo,
            student_id=user_id if role == Role.STUDENT else None,
            role=role,
            activity=container.activity_for(user_id),
        )

    @app.route("/sections/<int:section_id>/seats", endpoint="seat_plan")
    @login_required
    def seat_plan(section_id: int):
        vm = _vm()
        state = vm.load_seats(section_id)
        extra = {}
        if current_role() == Role.STUDENT:
            seat_state = vm.load_student_seat(section_id)
            seat = getattr(seat_state, "data", None)
            extra["my_seat"] = seat
            extra["my_seat_label"] = seat_display_id(seat.row, seat.column) if seat else None
        return render_state("seat_plan", state, **extra)

    @app.route("/sections/<int:section_id>/seats/select", methods=["POST"], endpoint="seat_select")
    @student_required
    def seat_select(section_id: int):
        data = payload()
        vm = _vm()
        loaded = vm.load_seats(section_id)
        if isinstance(loaded, Error):
            return render_state("seat_plan", loaded)
        row, column = int_field(data, "row"), int_field(data, "column")
        if not vm.select(row, column):
            return render("seat_plan", 400, state=Error("Seat is not available"))
        # Selection stays client-side; reflect it in the returned grid only.
        return render_state("seat_plan", vm.load_seats(section_id), selected=[row, column], label=seat_display_id(row, column))

    @app.route("/sections/<int:section_id>/seats/pick", methods=["POST"], endpoint="seat_pick")
    @student_required
    def seat_pick(section_id: int):
        data = payload()
        vm = _vm()
        loaded = vm.load_seats(section_id)
        if isinstance(loaded, Error):
            return render_state("seat_plan", loaded)
        row, column = int_field(data, "row"), int_field(data, "column")
        if not vm.select(row, column):
            return render("seat_plan", 400, state=Error("Seat is not available"))
        section = container.section_service.get(section_id)
        state = vm.pick(section_id, section_name=section.display_name if section else "")
        return render_state("seat_plan", state, seats=vm.grid.state)

    @app.route("/teacher/sections/<int:section_id>/seats/override", methods=["POST"], endpoint="seat_override")
    @roles_required(Role.TEACHER, Role.ADMIN, Role.SYSTEM_ADMIN)
    def seat_override(section_id: int):
        data = payload()
        vm = _vm()
        state = vm.override(
            section_id,
            student_id=int_field(data, "student_id"),
            row=int_field(data, "row"),
            column=int_field(data, "column"),
        )
        return render_state("seat_plan", state, seats=vm.grid.state)
