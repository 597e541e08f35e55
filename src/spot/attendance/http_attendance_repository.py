from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Sequence

from ..core.exceptions import ApiError, DuplicateAttendanceError, SessionExpiredError
from ..http.base import as_dict, as_list, fallback, list_or_empty
from ..http.client import ApiClient
from .model import AttendanceAnalytics, AttendanceRecord, StudentAttendance
from .qr import build_qr_payload
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)

_DUPLICATE_MARKERS = ("already recorded", "already marked", "duplicate")


def is_duplicate_attendance(error: ApiError) -> bool:
    if error.status_code != 400:
        return False
    text = error.message.lower()
    return any(m in text for m in _DUPLICATE_MARKERS)


class HttpAttendanceRepository(AttendanceRepository):
    def __init__(self, client: ApiClient):
        self._client = client

    def log(self, *, section_id: int) -> AttendanceRecord:
        try:
            data = self._client.post("/attendance/log", json={"sectionId": int(section_id)})
        except SessionExpiredError:
            raise
        except ApiError as e:
            if is_duplicate_attendance(e):
                raise DuplicateAttendanceError() from e
            raise
        r = as_dict(data)
        if r is None:
            raise ApiError("Failed to log attendance")
        return AttendanceRecord.from_api(r)

    @list_or_empty
    def list_for_section(self, section_id: int) -> Sequence[AttendanceRecord]:
        data = self._client.get(f"/attendance/section/{int(section_id)}")
        return [AttendanceRecord.from_api(r) for r in as_list(data)]

    @list_or_empty
    def list_for_section_on_date(self, section_id: int, day: date) -> Sequence[AttendanceRecord]:
        data = self._client.get(f"/attendance/section/{int(section_id)}/date/{day.isoformat()}")
        return [AttendanceRecord.from_api(r) for r in as_list(data)]

    @list_or_empty
    def list_for_student(self, student_id: int) -> Sequence[AttendanceRecord]:
        data = self._client.get(f"/attendance/student/{int(student_id)}")
        return [AttendanceRecord.from_api(r) for r in as_list(data)]

    def get_student_attendance(self, *, student_id: int, section_id: int) -> Optional[StudentAttendance]:
        data = self._client.get(f"/analytics/{int(section_id)}/students/{int(student_id)}")
        r = as_dict(data)
        if r is None:
            return None
        return StudentAttendance.from_api(r, section_id=int(section_id))

    def generate_qr(self, section_id: int) -> str:
        data = self._client.post("/attendance/generate-qr", params={"sectionId": int(section_id)})
        r = as_dict(data)
        if r and r.get("qrCodeData"):
            return str(r["qrCodeData"])
        logger.info("Backend returned no qrCodeData for section %s, building payload locally", section_id)
        return build_qr_payload(section_id)

    @fallback(AttendanceAnalytics)
    def get_analytics(self, section_id: int) -> AttendanceAnalytics:
        data = self._client.get(f"/analytics/{int(section_id)}")
        r = as_dict(data)
        return AttendanceAnalytics.from_api(r) if r else AttendanceAnalytics()
