from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from spot.core.enums import NotificationType, Role
from spot.core.exceptions import ApiError
from spot.core.state import Error, Success
from spot.notifications.service import ActivityLogger, NotificationService
from spot.notifications.store import InMemoryNotificationRepository
from spot.seats.model import Seat, SeatMap
from spot.seats.service import SeatService
from spot.seats.viewmodel import PICK_SUCCESS, SeatViewModel


@dataclass
class FakeSeatRepo:
    seats: list = field(default_factory=list)
    pick_error: Optional[Exception] = None
    picks: list = field(default_factory=list)
    map_calls: int = 0

    def list_for_section(self, section_id: int):
        return list(self.seats)

    def get_map(self, section_id: int) -> SeatMap:
        self.map_calls += 1
        return SeatMap(rows=5, columns=6, seats=tuple(self.seats))

    def get_student_seat(self, *, student_id: int, section_id: int):
        return next((s for s in self.seats if s.student_id == student_id), None)

    def pick(self, *, student_id: int, section_id: int, row: int, column: int) -> Seat:
        self.picks.append((student_id, section_id, row, column))
        if self.pick_error:
            raise self.pick_error
        seat = Seat(seat_id=len(self.seats) + 1, section_id=section_id, row=row, column=column, student_id=student_id)
        self.seats.append(seat)
        return seat

    def override(self, *, student_id: int, section_id: int, row: int, column: int) -> Seat:
        return self.pick(student_id=student_id, section_id=section_id, row=row, column=column)


def _viewmodel(repo, *, role=Role.STUDENT, student_id=7):
    notifications = NotificationService(InMemoryNotificationRepository())
    vm = SeatViewModel(
        SeatService(repo),
        repo,
        student_id=student_id,
        role=role,
        activity=ActivityLogger(notifications, 7),
    )
    return vm, notifications


def test_select_refuses_taken_cells():
    repo = FakeSeatRepo(seats=[Seat(1, 42, 0, 0, student_id=8)])
    vm, _ = _viewmodel(repo)
    vm.load_seats(42)

    assert vm.select(0, 0) is False
    assert vm.select(9, 9) is False
    assert vm.select(1, 1) is True
    assert vm.selected == (1, 1)


def test_select_needs_a_loaded_grid():
    vm, _ = _viewmodel(FakeSeatRepo())

    assert vm.select(0, 0) is False


def test_pick_without_selection_is_an_error():
    repo = FakeSeatRepo()
    vm, _ = _viewmodel(repo)

    assert vm.pick(42) == Error("Please select a seat first")
    assert repo.picks == []


def test_pick_submits_once_and_reloads():
    repo = FakeSeatRepo()
    vm, notifications = _viewmodel(repo)
    vm.load_seats(42)
    vm.select(2, 3)

    state = vm.pick(42, section_name="IT341 G01")

    assert state == Success(PICK_SUCCESS)
    assert repo.picks == [(7, 42, 2, 3)]
    assert repo.map_calls == 2
    assert vm.selected is None
    assert vm.grid.state.data.mine().row == 2
    [entry] = notifications.list(7)
    assert entry.type == NotificationType.SEAT_PLAN
    assert "row 3, column 4" in entry.message


def test_pick_failure_keeps_selection_and_grid():
    repo = FakeSeatRepo(pick_error=ApiError("Seat already taken", status_code=400))
    vm, notifications = _viewmodel(repo)
    vm.load_seats(42)
    vm.select(0, 1)

    state = vm.pick(42)

    assert state == Error("Seat already taken")
    assert vm.selected == (0, 1)
    assert repo.map_calls == 1
    assert notifications.list(7) == []


def test_teachers_cannot_pick():
    repo = FakeSeatRepo()
    vm, _ = _viewmodel(repo, role=Role.TEACHER)
    vm.load_seats(42)
    vm.select(0, 0)

    assert vm.pick(42) == Error("Only students can pick a seat")
    assert repo.picks == []


def test_teacher_override():
    repo = FakeSeatRepo()
    vm, _ = _viewmodel(repo, role=Role.TEACHER, student_id=None)

    state = vm.override(42, student_id=9, row=4, column=5)

    assert state == Success("Seat assignment updated")
    assert repo.picks == [(9, 42, 4, 5)]


def test_student_seat_lookup():
    repo = FakeSeatRepo(seats=[Seat(1, 42, 1, 2, student_id=7)])
    vm, _ = _viewmodel(repo)

    state = vm.load_student_seat(42)

    assert state.data.row == 1
