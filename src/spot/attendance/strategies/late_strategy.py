from __future__ import annotations

from typing import Optional

from ...core.enums import AttendanceStatus
from ..model import AttendanceDetail
from .base import DayStatusStrategy, StatusDecision


class LateStrategy(DayStatusStrategy):
    """Checked in past the late threshold."""

    def decide(self, *, detail: Optional[AttendanceDetail], late_threshold_minutes: int) -> StatusDecision:
        return StatusDecision(
            status=AttendanceStatus.LATE,
            note=f"Checked in more than {late_threshold_minutes} minutes after class start",
        )
