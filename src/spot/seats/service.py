from __future__ import annotations

from typing import Optional, Tuple

from ..common.validators import require_positive_id
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, ValidationError
from .grid import derive_seat_grid
from .model import Seat, SeatGrid
from .repository import SeatRepository


class SeatService:
    def __init__(self, seats: SeatRepository):
        self._seats = seats

    def grid_for(self, *, section_id: int, current_student_id: Optional[int], selected: Optional[Tuple[int, int]] = None) -> SeatGrid:
        seat_map = self._seats.get_map(require_positive_id(section_id, "Section"))
        return derive_seat_grid(seat_map.rows, seat_map.columns, seat_map.seats, current_student_id, selected)

    def pick(self, *, current_role: Role, student_id: int, section_id: int, row: int, column: int) -> Seat:
        if current_role != Role.STUDENT:
            raise AuthorizationError("Only students can pick a seat")
        self._require_cell(row, column)
        return self._seats.pick(
            student_id=require_positive_id(student_id, "Student"),
            section_id=require_positive_id(section_id, "Section"),
            row=int(row),
            column=int(column),
        )

    def override(self, *, current_role: Role, student_id: int, section_id: int, row: int, column: int) -> Seat:
        if current_role not in (Role.TEACHER, Role.ADMIN, Role.SYSTEM_ADMIN):
            raise AuthorizationError("Only teachers can reassign seats")
        self._require_cell(row, column)
        return self._seats.override(
            student_id=require_positive_id(student_id, "Student"),
            section_id=require_positive_id(section_id, "Section"),
            row=int(row),
            column=int(column),
        )

    @staticmethod
    def _require_cell(row, column) -> None:
        try:
            r, c = int(row), int(column)
        except (TypeError, ValueError):
            raise ValidationError("Seat position is invalid")
        if r < 0 or c < 0:
            raise ValidationError("Seat position is invalid")
