from __future__ import annotations

from datetime import date, time

import pytest

from spot.attendance.http_attendance_repository import HttpAttendanceRepository, is_duplicate_attendance
from spot.attendance.model import AttendanceAnalytics
from spot.core.exceptions import ApiError, DuplicateAttendanceError, SessionExpiredError


def _record(record_id=1, day="2024-03-04"):
    return {
        "id": record_id,
        "student": {"id": 7, "firstName": "Ana", "lastName": "Cruz"},
        "section": {"id": 42},
        "date": day,
        "startTime": "08:05:00",
        "endTime": None,
    }


def test_log_posts_section_id(api_client, fake_http):
    fake_http.ok("POST", "/attendance/log", _record())

    record = HttpAttendanceRepository(api_client).log(section_id=42)

    assert fake_http.calls[0].json == {"sectionId": 42}
    assert record.student_name == "Ana Cruz"
    assert record.start_time == time(8, 5)


def test_duplicate_log_is_recognised(api_client, fake_http):
    fake_http.fail("POST", "/attendance/log", 400, "Attendance already recorded for this session")

    with pytest.raises(DuplicateAttendanceError):
        HttpAttendanceRepository(api_client).log(section_id=42)


def test_other_bad_requests_keep_server_message(api_client, fake_http):
    fake_http.fail("POST", "/attendance/log", 400, "Class is not in session")

    with pytest.raises(ApiError) as exc:
        HttpAttendanceRepository(api_client).log(section_id=42)

    assert not isinstance(exc.value, DuplicateAttendanceError)
    assert str(exc.value) == "Class is not in session"


def test_is_duplicate_attendance_needs_400():
    assert is_duplicate_attendance(ApiError("Duplicate entry", status_code=400))
    assert not is_duplicate_attendance(ApiError("Duplicate entry", status_code=409))


def test_section_list_failure_is_empty(api_client, fake_http):
    fake_http.fail("GET", "/attendance/section/42", 500)

    assert HttpAttendanceRepository(api_client).list_for_section(42) == []


def test_section_list_session_expiry_propagates(api_client, fake_http):
    fake_http.fail("GET", "/attendance/section/42", 401)

    with pytest.raises(SessionExpiredError):
        HttpAttendanceRepository(api_client).list_for_section(42)


def test_section_list_on_date(api_client, fake_http):
    fake_http.ok("GET", "/attendance/section/42/date/2024-03-04", [_record(1), _record(2)])

    records = HttpAttendanceRepository(api_client).list_for_section_on_date(42, date(2024, 3, 4))

    assert [r.attendance_id for r in records] == [1, 2]


def test_analytics_default_on_failure(api_client, fake_http):
    fake_http.fail("GET", "/analytics/42", 500)

    assert HttpAttendanceRepository(api_client).get_analytics(42) == AttendanceAnalytics()


def test_analytics_parsed(api_client, fake_http):
    fake_http.ok(
        "GET",
        "/analytics/42",
        {
            "totalSessions": 3,
            "totalStudents": 20,
            "averageAttendance": 85.5,
            "attendanceByDate": [{"date": "2024-03-04", "count": 18, "percentage": 90.0}],
            "studentAttendance": [
                {"studentId": 7, "studentName": "Ana Cruz", "attendanceCount": 3, "attendancePercentage": 100.0}
            ],
        },
    )

    analytics = HttpAttendanceRepository(api_client).get_analytics(42)

    assert analytics.total_sessions == 3
    assert analytics.attendance_by_date[0].date == date(2024, 3, 4)
    assert analytics.student_attendance[0].student_name == "Ana Cruz"


def test_student_stats_with_details(api_client, fake_http):
    fake_http.ok(
        "GET",
        "/analytics/42/students/7",
        {
            "studentId": 7,
            "studentName": "Ana Cruz",
            "totalClassDays": 2,
            "daysPresent": 1,
            "attendanceByDate": {"2024-03-04": True, "2024-03-06": False},
            "attendanceData": {
                "2024-03-04": {"present": True, "startTime": "08:20", "scheduleStartTime": "08:00"},
            },
        },
    )

    stats = HttpAttendanceRepository(api_client).get_student_attendance(student_id=7, section_id=42)

    assert stats.attendance_by_date[date(2024, 3, 6)] is False
    assert stats.attendance_details[date(2024, 3, 4)].start_time == time(8, 20)
    assert stats.absent_count == 1


def test_generate_qr_falls_back_to_local_payload(api_client, fake_http):
    fake_http.ok("POST", "/attendance/generate-qr", {})

    assert HttpAttendanceRepository(api_client).generate_qr(42) == "attend:42"
    assert fake_http.calls[0].params == {"sectionId": 42}
