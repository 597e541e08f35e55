from __future__ import annotations

from typing import Optional

from ...core.enums import AttendanceStatus
from ..model import AttendanceDetail
from .base import DayStatusStrategy, StatusDecision


class PresentStrategy(DayStatusStrategy):
    """Checked in on time, or timing unknown."""

    def decide(self, *, detail: Optional[AttendanceDetail], late_threshold_minutes: int) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.PRESENT)
