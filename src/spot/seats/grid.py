"""Seat-plan grid derivation.

Rows and columns are zero-based. A cell is MINE when the logged-in student
occupies it, TAKEN when another student does and AVAILABLE otherwise.
"""

from __future__ import annotations

from typing import Iterable, Optional, Tuple

from ..core.enums import SeatCellState
from .model import Seat, SeatCell, SeatGrid


def derive_seat_grid(
    rows: int,
    columns: int,
    seats: Iterable[Seat],
    current_student_id: Optional[int],
    selected: Optional[Tuple[int, int]] = None,
) -> SeatGrid:
    occupied: dict[tuple[int, int], Seat] = {}
    for seat in seats:
        if not (0 <= seat.row < rows and 0 <= seat.column < columns):
            continue
        if seat.student_id is None:
            continue
        # Duplicates are not expected; keep the first one seen.
        occupied.setdefault((seat.row, seat.column), seat)

    grid = []
    for r in range(rows):
        line = []
        for c in range(columns):
            seat = occupied.get((r, c))
            if seat is None:
                state = SeatCellState.AVAILABLE
            elif current_student_id is not None and seat.student_id == int(current_student_id):
                state = SeatCellState.MINE
            else:
                state = SeatCellState.TAKEN
            line.append(
                SeatCell(
                    row=r,
                    column=c,
                    state=state,
                    student_id=seat.student_id if seat else None,
                    student_name=seat.student_name if seat else None,
                    selected=selected == (r, c),
                )
            )
        grid.append(tuple(line))
    return SeatGrid(rows=rows, columns=columns, cells=tuple(grid))


def seat_display_id(row: int, column: int) -> str:
    """Label like W1 or C3: side letter by column, number is the 1-based row."""

    if column == 0:
        prefix = "W"
    elif column in (1, 2):
        prefix = "C"
    elif column == 3:
        prefix = "A"
    else:
        prefix = "X"
    return f"{prefix}{row + 1}"
