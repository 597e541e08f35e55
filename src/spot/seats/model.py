from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from ..core.constants import SEAT_COLUMNS, SEAT_ROWS
from ..core.enums import SeatCellState
from ..users.model import Student


@dataclass(frozen=True)
class Seat:
    """A (row, column) position of a section; unique per section server-side."""

    _extra_json = ("student_name",)

    seat_id: Optional[int]
    section_id: int
    row: int
    column: int
    student_id: Optional[int] = None
    student: Optional[Student] = None

    @property
    def is_taken(self) -> bool:
        return self.student_id is not None

    @property
    def student_name(self) -> Optional[str]:
        return self.student.full_name if self.student else None

    @classmethod
    def from_api(cls, r: Mapping[str, Any]) -> "Seat":
        student = Student.from_api(r["student"]) if isinstance(r.get("student"), dict) else None
        student_id = student.student_id if student else r.get("studentId")
        return cls(
            seat_id=int(r["id"]) if r.get("id") is not None else None,
            section_id=int(r.get("sectionId") or 0),
            row=int(r.get("row") or 0),
            column=int(r.get("column") or 0),
            student_id=int(student_id) if student_id is not None else None,
            student=student,
        )


@dataclass(frozen=True)
class SeatMap:
    rows: int
    columns: int
    seats: tuple[Seat, ...] = field(default_factory=tuple)

    @classmethod
    def from_api(cls, r: Mapping[str, Any]) -> "SeatMap":
        seats = tuple(Seat.from_api(s) for s in (r.get("seats") or []) if isinstance(s, dict))
        return cls(
            rows=int(r.get("rows") or SEAT_ROWS),
            columns=int(r.get("columns") or SEAT_COLUMNS),
            seats=seats,
        )


@dataclass(frozen=True)
class SeatCell:
    _extra_json = ("selectable",)

    row: int
    column: int
    state: SeatCellState
    student_id: Optional[int] = None
    student_name: Optional[str] = None
    selected: bool = False

    @property
    def selectable(self) -> bool:
        return self.state in (SeatCellState.AVAILABLE, SeatCellState.MINE)


@dataclass(frozen=True)
class SeatGrid:
    rows: int
    columns: int
    cells: tuple[tuple[SeatCell, ...], ...]

    def cell(self, row: int, column: int) -> SeatCell:
        return self.cells[row][column]

    def mine(self) -> Optional[SeatCell]:
        for r in self.cells:
            for c in r:
                if c.state == SeatCellState.MINE:
                    return c
        return None
