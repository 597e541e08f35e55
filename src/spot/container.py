from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .attendance.factory import DayStatusStrategyFactory
from .attendance.http_attendance_repository import HttpAttendanceRepository
from .attendance.report_service import AttendanceReportService
from .attendance.service import AttendanceService
from .auth.http_auth_repository import HttpAuthRepository
from .auth.service import AuthService
from .core.constants import LATE_THRESHOLD_MINUTES
from .courses.http_course_repository import HttpCourseRepository
from .courses.service import CourseService
from .dashboard.service import DashboardService
from .enrollments.http_enrollment_repository import HttpEnrollmentRepository
from .enrollments.service import EnrollmentService
from .http.client import ApiClient
from .http.connection import ApiConfig, ApiConnection
from .http.tokens import SessionTokenStore, TokenStore
from .notifications.repository import NotificationRepository
from .notifications.service import ActivityLogger, NotificationService
from .notifications.store import InMemoryNotificationRepository, JsonFileNotificationRepository
from .schedules.http_schedule_repository import HttpScheduleRepository
from .schedules.service import ScheduleService
from .seats.http_seat_repository import HttpSeatRepository
from .seats.service import SeatService
from .sections.http_section_repository import HttpSectionRepository
from .sections.service import SectionService
from .users.http_user_repository import HttpAdminRepository, HttpStudentRepository, HttpTeacherRepository
from .users.service import UserService


@dataclass(frozen=True)
class Container:
    client: ApiClient
    tokens: TokenStore

    auth_repo: HttpAuthRepository
    courses_repo: HttpCourseRepository
    sections_repo: HttpSectionRepository
    schedules_repo: HttpScheduleRepository
    seats_repo: HttpSeatRepository
    attendance_repo: HttpAttendanceRepository
    enrollments_repo: HttpEnrollmentRepository
    students_repo: HttpStudentRepository
    teachers_repo: HttpTeacherRepository
    admins_repo: HttpAdminRepository
    notifications_repo: NotificationRepository

    auth_service: AuthService
    course_service: CourseService
    section_service: SectionService
    schedule_service: ScheduleService
    seat_service: SeatService
    attendance_service: AttendanceService
    report_service: AttendanceReportService
    enrollment_service: EnrollmentService
    user_service: UserService
    notification_service: NotificationService
    dashboard_service: DashboardService

    def activity_for(self, user_id: int) -> ActivityLogger:
        return ActivityLogger(self.notification_service, user_id)


def build_container(
    *,
    api_base_url: str,
    api_timeout: float,
    notifications_path: Optional[str] = None,
    tokens: Optional[TokenStore] = None,
    connection: Optional[ApiConnection] = None,
) -> Container:
    conn = connection or ApiConnection.get_instance(ApiConfig(base_url=api_base_url, timeout=float(api_timeout)))
    tokens = tokens or SessionTokenStore()
    client = ApiClient(conn, tokens)

    auth_repo = HttpAuthRepository(client)
    courses_repo = HttpCourseRepository(client)
    sections_repo = HttpSectionRepository(client)
    schedules_repo = HttpScheduleRepository(client)
    seats_repo = HttpSeatRepository(client)
    attendance_repo = HttpAttendanceRepository(client)
    enrollments_repo = HttpEnrollmentRepository(client)
    students_repo = HttpStudentRepository(client)
    teachers_repo = HttpTeacherRepository(client)
    admins_repo = HttpAdminRepository(client)
    notifications_repo: NotificationRepository
    if notifications_path:
        notifications_repo = JsonFileNotificationRepository(Path(notifications_path))
    else:
        notifications_repo = InMemoryNotificationRepository()

    enrollment_service = EnrollmentService(enrollments_repo, schedules_repo)

    return Container(
        client=client,
        tokens=tokens,
        auth_repo=auth_repo,
        courses_repo=courses_repo,
        sections_repo=sections_repo,
        schedules_repo=schedules_repo,
        seats_repo=seats_repo,
        attendance_repo=attendance_repo,
        enrollments_repo=enrollments_repo,
        students_repo=students_repo,
        teachers_repo=teachers_repo,
        admins_repo=admins_repo,
        notifications_repo=notifications_repo,
        auth_service=AuthService(auth_repo, tokens),
        course_service=CourseService(courses_repo),
        section_service=SectionService(sections_repo, schedules_repo),
        schedule_service=ScheduleService(schedules_repo),
        seat_service=SeatService(seats_repo),
        attendance_service=AttendanceService(
            attendance_repo,
            schedules_repo,
            strategy_factory=DayStatusStrategyFactory(late_threshold_minutes=LATE_THRESHOLD_MINUTES),
        ),
        report_service=AttendanceReportService(attendance_repo, enrollments_repo),
        enrollment_service=enrollment_service,
        user_service=UserService(students_repo, teachers_repo, admins_repo),
        notification_service=NotificationService(notifications_repo),
        dashboard_service=DashboardService(
            courses=courses_repo,
            sections=sections_repo,
            students=students_repo,
            teachers=teachers_repo,
            attendance=attendance_repo,
            enrollments=enrollment_service,
        ),
    )
