from __future__ import annotations

import logging
from typing import Optional, Tuple

from ..core.enums import Role
from ..core.exceptions import ValidationError
from ..core.state import Error, StateHolder, Success
from ..notifications.service import ActivityLogger
from .model import Seat, SeatGrid
from .repository import SeatRepository
from .service import SeatService

logger = logging.getLogger(__name__)

PICK_SUCCESS = "Seat selected successfully"


class SeatViewModel:
    """Seat-plan screen: grid, the student's own seat and the pick action.

    The selection is local until `pick` submits it; the grid is reloaded
    from the server afterwards instead of being patched in place.
    """

    def __init__(
        self,
        service: SeatService,
        seats: SeatRepository,
        *,
        student_id: Optional[int],
        role: Role = Role.STUDENT,
        activity: Optional[ActivityLogger] = None,
    ):
        self._service = service
        self._seats = seats
        self._student_id = student_id
        self._role = role
        self._activity = activity
        self.grid: StateHolder[SeatGrid] = StateHolder("seats")
        self.student_seat: StateHolder[Optional[Seat]] = StateHolder("student_seat")
        self.pick_result: StateHolder[str] = StateHolder("pick")
        self.selected: Optional[Tuple[int, int]] = None

    def load_seats(self, section_id: int):
        return self.grid.load(
            lambda: self._service.grid_for(
                section_id=section_id, current_student_id=self._student_id, selected=self.selected
            )
        )

    def load_student_seat(self, section_id: int):
        if self._student_id is None:
            self.student_seat.set(Error("User ID not found. Please log in again."))
            return self.student_seat.state
        return self.student_seat.load(
            lambda: self._seats.get_student_seat(student_id=self._student_id, section_id=section_id)
        )

    def select(self, row: int, column: int) -> bool:
        """Mark a cell as the pending choice; taken cells are refused."""

        state = self.grid.state
        if not isinstance(state, Success):
            return False
        grid: SeatGrid = state.data
        if not (0 <= row < grid.rows and 0 <= column < grid.columns):
            return False
        if not grid.cell(row, column).selectable:
            return False
        self.selected = (row, column)
        return True

    def clear_selection(self) -> None:
        self.selected = None

    def pick(self, section_id: int, *, section_name: str = ""):
        if self.selected is None:
            self.pick_result.set(Error("Please select a seat first"))
            return self.pick_result.state
        if self._student_id is None:
            self.pick_result.set(Error("User ID not found. Please log in again."))
            return self.pick_result.state

        row, column = self.selected

        def submit() -> str:
            self._service.pick(
                current_role=self._role,
                student_id=self._student_id,
                section_id=section_id,
                row=row,
                column=column,
            )
            return PICK_SUCCESS

        state = self.pick_result.load(submit)
        if isinstance(state, Success):
            self.selected = None
            logger.info("Student %s picked seat (%s, %s) in section %s", self._student_id, row, column, section_id)
            if self._activity:
                self._activity.log_seat_selection(
                    section_name=section_name or f"Section #{section_id}", row=row, column=column, section_id=section_id
                )
            self.load_seats(section_id)
        return state

    def override(self, section_id: int, *, student_id: int, row: int, column: int):
        def submit() -> str:
            if student_id is None:
                raise ValidationError("Student is required")
            self._service.override(
                current_role=self._role, student_id=student_id, section_id=section_id, row=row, column=column
            )
            return "Seat assignment updated"

        state = self.pick_result.load(submit)
        if isinstance(state, Success):
            self.load_seats(section_id)
        return state
