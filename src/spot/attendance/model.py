from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, time
from typing import Any, Mapping, Optional

from ..common.datetime_utils import parse_time, to_date
from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """One check-in of a student into a section on a date."""

    attendance_id: int
    student_id: int
    student_name: str
    section_id: int
    date: date
    start_time: Optional[time] = None
    end_time: Optional[time] = None

    @classmethod
    def from_api(cls, r: Mapping[str, Any]) -> "AttendanceRecord":
        student = r.get("student") if isinstance(r.get("student"), dict) else {}
        section = r.get("section") if isinstance(r.get("section"), dict) else {}
        first = student.get("firstName") or ""
        last = student.get("lastName") or ""
        return cls(
            attendance_id=int(r["id"]),
            student_id=int(student.get("id") or r.get("studentId") or 0),
            student_name=(f"{first} {last}".strip() or r.get("studentName") or ""),
            section_id=int(section.get("id") or r.get("sectionId") or 0),
            date=to_date(r["date"]),
            start_time=parse_time(r.get("startTime")),
            end_time=parse_time(r.get("endTime")),
        )


@dataclass(frozen=True)
class AttendanceDetail:
    date: date
    present: bool
    start_time: Optional[time] = None
    end_time: Optional[time] = None
    schedule_start_time: Optional[time] = None
    schedule_end_time: Optional[time] = None

    @classmethod
    def from_api(cls, r: Mapping[str, Any]) -> "AttendanceDetail":
        return cls(
            date=to_date(r["date"]),
            present=bool(r.get("present", False)),
            start_time=parse_time(r.get("startTime")),
            end_time=parse_time(r.get("endTime")),
            schedule_start_time=parse_time(r.get("scheduleStartTime")),
            schedule_end_time=parse_time(r.get("scheduleEndTime")),
        )


@dataclass(frozen=True)
class StudentAttendance:
    """A student's per-date attendance in one section."""

    student_id: int
    student_name: str
    section_id: int
    total_class_days: int = 0
    days_present: int = 0
    attendance_rate: float = 0.0
    attendance_by_date: dict[date, bool] = field(default_factory=dict)
    attendance_details: dict[date, AttendanceDetail] = field(default_factory=dict)

    @property
    def absent_count(self) -> int:
        return self.total_class_days - self.days_present

    @classmethod
    def from_api(cls, r: Mapping[str, Any], *, section_id: int = 0) -> "StudentAttendance":
        by_date = {to_date(k): bool(v) for k, v in (r.get("attendanceByDate") or {}).items()}
        details: dict[date, AttendanceDetail] = {}
        for k, v in (r.get("attendanceData") or {}).items():
            if isinstance(v, dict):
                detail = AttendanceDetail.from_api({"date": k, **v})
                details[detail.date] = detail
        return cls(
            student_id=int(r.get("studentId") or 0),
            student_name=r.get("studentName") or "",
            section_id=int(r.get("sectionId") or section_id),
            total_class_days=int(r.get("totalClassDays") or 0),
            days_present=int(r.get("daysPresent") or 0),
            attendance_rate=float(r.get("attendanceRate") or 0.0),
            attendance_by_date=by_date,
            attendance_details=details,
        )


@dataclass(frozen=True)
class CalendarDay:
    date: date
    in_current_month: bool
    status: AttendanceStatus
    detail: Optional[AttendanceDetail] = None

    def to_dict(self) -> dict:
        return {
            "date": self.date.isoformat(),
            "day": self.date.day,
            "in_current_month": self.in_current_month,
            "status": self.status.value,
        }


@dataclass(frozen=True)
class DailyAttendance:
    date: date
    count: int
    percentage: float


@dataclass(frozen=True)
class StudentAttendanceSummary:
    student_id: int
    student_name: str
    attendance_count: int
    attendance_percentage: float


@dataclass(frozen=True)
class AttendanceAnalytics:
    total_sessions: int = 0
    total_students: int = 0
    average_attendance: float = 0.0
    attendance_by_date: tuple[DailyAttendance, ...] = ()
    student_attendance: tuple[StudentAttendanceSummary, ...] = ()

    @classmethod
    def from_api(cls, r: Mapping[str, Any]) -> "AttendanceAnalytics":
        by_date = tuple(
            DailyAttendance(
                date=to_date(d["date"]),
                count=int(d.get("count") or 0),
                percentage=float(d.get("percentage") or 0.0),
            )
            for d in (r.get("attendanceByDate") or [])
            if isinstance(d, dict) and d.get("date")
        )
        students = tuple(
            StudentAttendanceSummary(
                student_id=int(s.get("studentId") or 0),
                student_name=s.get("studentName") or "",
                attendance_count=int(s.get("attendanceCount") or 0),
                attendance_percentage=float(s.get("attendancePercentage") or 0.0),
            )
            for s in (r.get("studentAttendance") or [])
            if isinstance(s, dict)
        )
        return cls(
            total_sessions=int(r.get("totalSessions") or 0),
            total_students=int(r.get("totalStudents") or 0),
            average_attendance=float(r.get("averageAttendance") or 0.0),
            attendance_by_date=by_date,
            student_attendance=students,
        )

    def to_dict(self) -> dict:
        return {
            "totalSessions": self.total_sessions,
            "totalStudents": self.total_students,
            "averageAttendance": self.average_attendance,
            "attendanceByDate": [
                {"date": d.date.isoformat(), "count": d.count, "percentage": d.percentage} for d in self.attendance_by_date
            ],
            "studentAttendance": [
                {
                    "studentId": s.student_id,
                    "studentName": s.student_name,
                    "attendanceCount": s.attendance_count,
                    "attendancePercentage": s.attendance_percentage,
                }
                for s in self.student_attendance
            ],
        }
