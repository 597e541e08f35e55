from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Sequence

from ..common.datetime_utils import now_local
from ..common.validators import require_positive_id
from ..schedules.model import Schedule
from ..schedules.repository import ScheduleRepository
from .calendar import create_calendar_days
from .factory import DayStatusStrategyFactory
from .model import AttendanceDetail, AttendanceRecord, CalendarDay, StudentAttendance
from .qr import build_qr_payload, is_within_class_schedule
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


def _schedule_for_day(schedules: Sequence[Schedule], day: date) -> Optional[Schedule]:
    same_day = [s for s in schedules if s.day_of_week == day.isoweekday()]
    if not same_day:
        return None
    return min(same_day, key=lambda s: s.time_start)


def details_from_records(records: Sequence[AttendanceRecord], schedules: Sequence[Schedule]) -> dict[date, AttendanceDetail]:
    """Build per-date details from raw check-ins, pairing each with that weekday's class."""

    details: dict[date, AttendanceDetail] = {}
    for r in sorted(records, key=lambda x: (x.date, x.start_time is None, x.start_time)):
        if r.date in details:
            continue
        slot = _schedule_for_day(schedules, r.date)
        details[r.date] = AttendanceDetail(
            date=r.date,
            present=True,
            start_time=r.start_time,
            end_time=r.end_time,
            schedule_start_time=slot.time_start if slot else None,
            schedule_end_time=slot.time_end if slot else None,
        )
    return details


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        schedules: ScheduleRepository,
        *,
        strategy_factory: Optional[DayStatusStrategyFactory] = None,
    ):
        self._attendance = attendance
        self._schedules = schedules
        self._factory = strategy_factory or DayStatusStrategyFactory()

    def log(self, section_id: int) -> AttendanceRecord:
        return self._attendance.log(section_id=require_positive_id(section_id, "Section"))

    def section_history(self, section_id: int, *, on: Optional[date] = None) -> Sequence[AttendanceRecord]:
        sid = require_positive_id(section_id, "Section")
        if on is not None:
            return self._attendance.list_for_section_on_date(sid, on)
        records = self._attendance.list_for_section(sid)
        return sorted(records, key=lambda r: (r.date, r.student_name), reverse=True)

    def student_history(self, student_id: int) -> Sequence[AttendanceRecord]:
        records = self._attendance.list_for_student(require_positive_id(student_id, "Student"))
        return sorted(records, key=lambda r: r.date, reverse=True)

    def student_attendance(self, *, student_id: int, section_id: int) -> StudentAttendance:
        """Per-date attendance of a student, from analytics or rebuilt from raw check-ins."""

        sid = require_positive_id(section_id, "Section")
        stats = self._attendance.get_student_attendance(
            student_id=require_positive_id(student_id, "Student"), section_id=sid
        )
        schedules = self._schedules.list_for_section(sid)
        if stats is not None and stats.attendance_by_date:
            if stats.attendance_details:
                return stats
            records = [r for r in self._attendance.list_for_student(student_id) if r.section_id == sid]
            details = details_from_records(records, schedules)
            merged = {d: detail for d, detail in details.items() if stats.attendance_by_date.get(d)}
            return StudentAttendance(
                student_id=stats.student_id,
                student_name=stats.student_name,
                section_id=sid,
                total_class_days=stats.total_class_days,
                days_present=stats.days_present,
                attendance_rate=stats.attendance_rate,
                attendance_by_date=stats.attendance_by_date,
                attendance_details=merged,
            )

        logger.info("No analytics for student %s in section %s, using raw records", student_id, sid)
        records = [r for r in self._attendance.list_for_student(student_id) if r.section_id == sid]
        details = details_from_records(records, schedules)
        present = len(details)
        return StudentAttendance(
            student_id=int(student_id),
            student_name=records[0].student_name if records else "",
            section_id=sid,
            total_class_days=present,
            days_present=present,
            attendance_rate=100.0 if present else 0.0,
            attendance_by_date={d: True for d in details},
            attendance_details=details,
        )

    def calendar(self, *, student_id: int, section_id: int, month: date) -> list[CalendarDay]:
        stats = self.student_attendance(student_id=student_id, section_id=section_id)
        return create_calendar_days(
            month, stats.attendance_by_date, stats.attendance_details, factory=self._factory
        )

    def generate_qr(self, section_id: int) -> str:
        return self._attendance.generate_qr(require_positive_id(section_id, "Section"))

    def qr_payload(self, section_id: int) -> str:
        return build_qr_payload(require_positive_id(section_id, "Section"))

    def class_in_session(self, section_id: int, *, now=None) -> bool:
        schedules = self._schedules.list_for_section(require_positive_id(section_id, "Section"))
        return is_within_class_schedule(schedules, now or now_local())

    def analytics(self, section_id: int):
        return self._attendance.get_analytics(require_positive_id(section_id, "Section"))
