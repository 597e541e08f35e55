from __future__ import annotations

import csv
import io
from dataclasses import dataclass
from datetime import date
from typing import Optional, Sequence

from ..common.datetime_utils import format_time
from ..enrollments.repository import EnrollmentRepository
from .repository import AttendanceRepository


@dataclass(frozen=True)
class ReportData:
    rows: list[dict]
    by_date: list[dict]
    by_student: list[dict]
    summary: dict


CSV_FIELDS = ["date", "student_id", "student_name", "start_time", "end_time"]


def _pct(part: int, whole: int) -> float:
    return round(part * 100.0 / whole, 1) if whole else 0.0


class AttendanceReportService:
    """Section attendance aggregated client-side for tables and CSV export."""

    def __init__(self, attendance: AttendanceRepository, enrollments: EnrollmentRepository):
        self._attendance = attendance
        self._enrollments = enrollments

    def build_section_report(
        self,
        section_id: int,
        *,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> ReportData:
        records = self._attendance.list_for_section(section_id)
        enrolled = self._enrollments.list_for_section(section_id)
        total_students = len(enrolled)

        out_rows: list[dict] = []
        date_map: dict[date, set[int]] = {}
        student_map: dict[int, dict] = {}

        for e in enrolled:
            if e.student:
                student_map[e.student.student_id] = {
                    "student_id": e.student.student_id,
                    "student_name": e.student.full_name,
                    "dates": set(),
                }

        for r in records:
            if start and r.date < start:
                continue
            if end and r.date > end:
                continue

            out_rows.append(
                {
                    "date": r.date.isoformat(),
                    "student_id": r.student_id,
                    "student_name": r.student_name,
                    "start_time": format_time(r.start_time) or "-",
                    "end_time": format_time(r.end_time) or "-",
                }
            )
            date_map.setdefault(r.date, set()).add(r.student_id)

            s = student_map.get(r.student_id)
            if not s:
                s = {"student_id": r.student_id, "student_name": r.student_name, "dates": set()}
                student_map[r.student_id] = s
            s["dates"].add(r.date)

        out_rows.sort(key=lambda x: (x["date"], x["student_name"]), reverse=True)
        total_sessions = len(date_map)
        # Students who checked in but are missing from the enrollment list still count.
        total_students = max(total_students, len(student_map))

        by_date = [
            {"date": d.isoformat(), "count": len(ids), "percentage": _pct(len(ids), total_students)}
            for d, ids in sorted(date_map.items())
        ]
        by_student = [
            {
                "student_id": s["student_id"],
                "student_name": s["student_name"],
                "attendance_count": len(s["dates"]),
                "attendance_percentage": _pct(len(s["dates"]), total_sessions),
            }
            for s in student_map.values()
        ]
        by_student.sort(key=lambda x: (-x["attendance_count"], x["student_name"]))

        average = round(sum(d["percentage"] for d in by_date) / len(by_date), 1) if by_date else 0.0
        summary = {
            "total_sessions": total_sessions,
            "total_students": total_students,
            "total_records": len(out_rows),
            "average_attendance": average,
        }
        return ReportData(rows=out_rows, by_date=by_date, by_student=by_student, summary=summary)


def report_filename(section_id: int, today: date) -> str:
    return f"attendance_section_{int(section_id)}_{today.isoformat()}.csv"


def write_report_csv(rows: Sequence[dict]) -> bytes:
    out = io.StringIO()
    writer = csv.DictWriter(out, fieldnames=CSV_FIELDS, extrasaction="ignore")
    writer.writeheader()
    for row in rows:
        writer.writerow(row)
    return out.getvalue().encode("utf-8-sig")
