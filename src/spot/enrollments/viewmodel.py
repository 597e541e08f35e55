from __future__ import annotations

from typing import Optional

from ..core.enums import EnrollErrorType
from ..core.exceptions import DomainError, EnrollmentError, SessionExpiredError
from ..core.state import Error, StateHolder, Success
from ..notifications.service import ActivityLogger
from .model import Enrollment
from .service import EnrollmentService

NO_USER = "User ID not found. Please log in again."


class EnrollmentViewModel:
    def __init__(
        self,
        service: EnrollmentService,
        *,
        student_id: Optional[int],
        activity: Optional[ActivityLogger] = None,
    ):
        self._service = service
        self._student_id = student_id
        self._activity = activity
        self.enrollments: StateHolder[list] = StateHolder("enrollments")
        self.status: StateHolder[bool] = StateHolder("enrollment_status")
        self.action: StateHolder[Enrollment] = StateHolder("enroll")
        self.last_error_type: Optional[EnrollErrorType] = None

    def load_student_enrollments(self):
        if self._student_id is None:
            self.enrollments.set(Error(NO_USER))
            return self.enrollments.state
        return self.enrollments.load(lambda: list(self._service.list_for_student(self._student_id)))

    def check_status(self, section_id: int):
        if self._student_id is None:
            self.status.set(Error(NO_USER))
            return self.status.state
        return self.status.load(lambda: self._service.is_enrolled(student_id=self._student_id, section_id=section_id))

    def enroll(self, enrollment_key: str):
        self.last_error_type = None
        token = self.action.begin()
        try:
            enrollment = self._service.enroll(enrollment_key)
        except SessionExpiredError:
            self.action.reset()
            raise
        except EnrollmentError as e:
            self.last_error_type = e.error_type
            self.action.complete(token, Error(str(e)))
            return self.action.state
        except DomainError as e:
            self.last_error_type = EnrollErrorType.GENERAL
            self.action.complete(token, Error(str(e)))
            return self.action.state

        self.action.complete(token, Success(enrollment))
        if self._activity:
            section = enrollment.section
            self._activity.log_enrollment(
                course_name=section.course_name, section_name=section.section_name, section_id=section.section_id
            )
        return self.action.state

    def reset(self) -> None:
        self.enrollments.reset()
        self.status.reset()
        self.action.reset()
        self.last_error_type = None
