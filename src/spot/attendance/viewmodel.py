from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from ..core.exceptions import InvalidQrCodeError
from ..core.state import Error, StateHolder, Success
from ..notifications.service import ActivityLogger
from .model import AttendanceRecord, CalendarDay
from .qr import parse_qr_payload
from .service import AttendanceService

logger = logging.getLogger(__name__)


class AttendanceViewModel:
    """QR scan / attendance log flow plus the student's calendar.

    `scanner_active` tells the screen whether to keep reading frames. It goes
    off while a log call is in flight and stays off after a success; any
    error turns it back on.
    """

    def __init__(
        self,
        service: AttendanceService,
        *,
        student_id: Optional[int] = None,
        activity: Optional[ActivityLogger] = None,
    ):
        self._service = service
        self._student_id = student_id
        self._activity = activity
        self.log_state: StateHolder[AttendanceRecord] = StateHolder("attendance_log")
        self.calendar: StateHolder[list[CalendarDay]] = StateHolder("attendance_calendar")
        self.history: StateHolder[list[AttendanceRecord]] = StateHolder("attendance_history")
        self.scanner_active = True

    def scan(self, text: str, *, section_name: str = ""):
        try:
            section_id = parse_qr_payload(text)
        except InvalidQrCodeError as e:
            logger.info("Rejected QR payload %r", text)
            self.log_state.set(Error(str(e)))
            self.scanner_active = True
            return self.log_state.state

        self.scanner_active = False
        name = section_name or f"Section #{section_id}"
        if self._activity:
            self._activity.log_qr_scan(section_name=name, section_id=section_id)
        state = self.log_state.load(lambda: self._service.log(section_id))
        if isinstance(state, Success):
            if self._activity:
                record: AttendanceRecord = state.data
                self._activity.log_attendance_recorded(
                    section_name=name,
                    date=record.date.isoformat(),
                    section_id=section_id,
                )
        else:
            self.scanner_active = True
        return state

    def rearm(self) -> None:
        self.log_state.reset()
        self.scanner_active = True

    def load_calendar(self, section_id: int, month: date):
        student_id = self._student_id

        def fetch() -> list[CalendarDay]:
            return self._service.calendar(student_id=student_id, section_id=section_id, month=month)

        if student_id is None:
            self.calendar.set(Error("User ID not found. Please log in again."))
            return self.calendar.state
        return self.calendar.load(fetch)

    def load_section_history(self, section_id: int, *, on: Optional[date] = None):
        return self.history.load(lambda: list(self._service.section_history(section_id, on=on)))

    def close(self) -> None:
        self.log_state.close()
        self.calendar.close()
        self.history.close()
