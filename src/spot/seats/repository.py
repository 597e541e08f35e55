from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Seat, SeatMap


class SeatRepository(Protocol):
    def list_for_section(self, section_id: int) -> Sequence[Seat]:
        raise NotImplementedError

    def get_map(self, section_id: int) -> SeatMap:
        raise NotImplementedError

    def get_student_seat(self, *, student_id: int, section_id: int) -> Optional[Seat]:
        raise NotImplementedError

    def pick(self, *, student_id: int, section_id: int, row: int, column: int) -> Seat:
        raise NotImplementedError

    def override(self, *, student_id: int, section_id: int, row: int, column: int) -> Seat:
        """Teacher-only: move a student to any cell."""

        raise NotImplementedError
