from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, time
from typing import Optional

from spot.attendance.model import AttendanceAnalytics, AttendanceRecord, StudentAttendance
from spot.attendance.service import AttendanceService
from spot.attendance.viewmodel import AttendanceViewModel
from spot.core.enums import AttendanceStatus, NotificationType
from spot.core.exceptions import ApiError, DuplicateAttendanceError
from spot.core.state import Error, Success
from spot.notifications.service import ActivityLogger, NotificationService
from spot.notifications.store import InMemoryNotificationRepository
from spot.schedules.model import Schedule


@dataclass
class FakeAttendanceRepo:
    records: list = field(default_factory=list)
    stats: Optional[StudentAttendance] = None
    log_error: Optional[Exception] = None
    logged: list = field(default_factory=list)

    def log(self, *, section_id: int) -> AttendanceRecord:
        self.logged.append(section_id)
        if self.log_error:
            raise self.log_error
        return AttendanceRecord(
            attendance_id=1, student_id=7, student_name="Ana Cruz", section_id=section_id, date=date(2024, 3, 4)
        )

    def list_for_section(self, section_id: int):
        return [r for r in self.records if r.section_id == section_id]

    def list_for_section_on_date(self, section_id: int, day: date):
        return [r for r in self.records if r.section_id == section_id and r.date == day]

    def list_for_student(self, student_id: int):
        return [r for r in self.records if r.student_id == student_id]

    def get_student_attendance(self, *, student_id: int, section_id: int):
        return self.stats

    def generate_qr(self, section_id: int) -> str:
        return f"attend:{section_id}"

    def get_analytics(self, section_id: int):
        return AttendanceAnalytics()


@dataclass
class FakeScheduleRepo:
    schedules: list = field(default_factory=list)

    def list_for_section(self, section_id: int):
        return [s for s in self.schedules if s.section_id == section_id]


def _viewmodel(repo, schedules=None, *, student_id=7):
    notifications = NotificationService(InMemoryNotificationRepository())
    activity = ActivityLogger(notifications, student_id or 1)
    service = AttendanceService(repo, FakeScheduleRepo(schedules or []))
    return AttendanceViewModel(service, student_id=student_id, activity=activity), notifications


def test_invalid_payload_makes_no_call():
    repo = FakeAttendanceRepo()
    vm, _ = _viewmodel(repo)

    state = vm.scan("invalid")

    assert state == Error("Invalid QR code")
    assert repo.logged == []
    assert vm.scanner_active is True


def test_successful_scan_pauses_scanner_and_logs_activity():
    repo = FakeAttendanceRepo()
    vm, notifications = _viewmodel(repo)

    state = vm.scan("attend:42", section_name="IT341 G01")

    assert isinstance(state, Success)
    assert repo.logged == [42]
    assert vm.scanner_active is False
    recorded, scanned = notifications.list(7)
    assert recorded.type == NotificationType.ATTENDANCE
    assert recorded.message == "Attendance recorded for IT341 G01 on 2024-03-04"
    assert scanned.message == "Scanned QR code for IT341 G01 attendance"


def test_duplicate_attendance_rearms_scanner():
    repo = FakeAttendanceRepo(log_error=DuplicateAttendanceError())
    vm, notifications = _viewmodel(repo)

    state = vm.scan("attend:42")

    assert state == Error("Attendance already recorded for today")
    assert vm.scanner_active is True
    assert [n.message for n in notifications.list(7)] == ["Scanned QR code for Section #42 attendance"]


def test_network_error_surfaces_message():
    repo = FakeAttendanceRepo(log_error=ApiError("Network error: Unable to connect to server"))
    vm, _ = _viewmodel(repo)

    assert vm.scan("attend:42") == Error("Network error: Unable to connect to server")


def test_rearm_resets_state():
    vm, _ = _viewmodel(FakeAttendanceRepo())
    vm.scan("attend:42")

    vm.rearm()

    assert vm.scanner_active is True
    assert vm.log_state.state.status == "idle"


def test_calendar_rebuilt_from_raw_records_when_no_stats():
    records = [
        AttendanceRecord(1, 7, "Ana Cruz", 42, date(2024, 3, 4), start_time=time(8, 5)),
        AttendanceRecord(2, 7, "Ana Cruz", 42, date(2024, 3, 11), start_time=time(8, 40)),
    ]
    schedules = [Schedule(1, 42, 1, time(8, 0), time(9, 30))]
    vm, _ = _viewmodel(FakeAttendanceRepo(records=records), schedules)

    state = vm.load_calendar(42, date(2024, 3, 1))

    assert isinstance(state, Success)
    by_date = {d.date: d.status for d in state.data}
    assert by_date[date(2024, 3, 4)] == AttendanceStatus.PRESENT
    assert by_date[date(2024, 3, 11)] == AttendanceStatus.LATE
    assert by_date[date(2024, 3, 18)] == AttendanceStatus.NO_CLASS


def test_calendar_uses_backend_flags():
    stats = StudentAttendance(
        student_id=7,
        student_name="Ana Cruz",
        section_id=42,
        total_class_days=2,
        days_present=1,
        attendance_by_date={date(2024, 3, 4): True, date(2024, 3, 6): False},
    )
    vm, _ = _viewmodel(FakeAttendanceRepo(stats=stats))

    state = vm.load_calendar(42, date(2024, 3, 1))

    by_date = {d.date: d.status for d in state.data}
    assert by_date[date(2024, 3, 4)] == AttendanceStatus.PRESENT
    assert by_date[date(2024, 3, 6)] == AttendanceStatus.ABSENT


def test_calendar_without_user_is_an_error():
    vm, _ = _viewmodel(FakeAttendanceRepo(), student_id=None)

    assert isinstance(vm.load_calendar(42, date(2024, 3, 1)), Error)
