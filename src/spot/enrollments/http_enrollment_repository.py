from __future__ import annotations

from typing import Sequence

from ..core.enums import EnrollErrorType
from ..core.exceptions import ApiError, EnrollmentError, SessionExpiredError
from ..http.base import as_dict, as_list, list_or_empty
from ..http.client import NETWORK_ERROR, ApiClient
from .model import Enrollment
from .repository import EnrollmentRepository


def classify_enroll_error(error: ApiError) -> EnrollErrorType:
    """Map a failed enroll call onto the reason shown to the student."""

    if error.status_code is None or error.message == NETWORK_ERROR or (error.status_code or 0) >= 500:
        return EnrollErrorType.NETWORK_ERROR
    text = error.message.lower()
    if "already enrolled in this section" in text:
        return EnrollErrorType.DUPLICATE_SECTION
    if "already enrolled" in text and ("course" in text or "another section" in text):
        return EnrollErrorType.DUPLICATE_COURSE
    if "invalid enrollment key" in text or "not found" in text:
        return EnrollErrorType.INVALID_KEY
    if "closed" in text or "not open" in text:
        return EnrollErrorType.CLOSED_ENROLLMENT
    return EnrollErrorType.GENERAL


class HttpEnrollmentRepository(EnrollmentRepository):
    def __init__(self, client: ApiClient):
        self._client = client

    def enroll(self, enrollment_key: str) -> Enrollment:
        try:
            data = self._client.post("/enrollments/enroll", json={"enrollmentKey": enrollment_key.strip()})
        except SessionExpiredError:
            raise
        except ApiError as e:
            raise EnrollmentError(e.message, error_type=classify_enroll_error(e), status_code=e.status_code) from e
        r = as_dict(data)
        if r is None:
            raise EnrollmentError("Failed to enroll", error_type=EnrollErrorType.GENERAL)
        return Enrollment.from_api(r)

    @list_or_empty
    def list_for_student(self, student_id: int) -> Sequence[Enrollment]:
        data = self._client.get(f"/enrollments/student/{int(student_id)}")
        return [Enrollment.from_api(r) for r in as_list(data)]

    @list_or_empty
    def list_for_section(self, section_id: int) -> Sequence[Enrollment]:
        data = self._client.get(f"/enrollments/section/{int(section_id)}")
        return [Enrollment.from_api(r) for r in as_list(data)]

    def is_enrolled(self, *, student_id: int, section_id: int) -> bool:
        data = self._client.get(
            "/enrollments/status", params={"studentId": int(student_id), "sectionId": int(section_id)}
        )
        return bool(data)
