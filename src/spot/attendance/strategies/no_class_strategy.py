from __future__ import annotations

from typing import Optional

from ...core.enums import AttendanceStatus
from ..model import AttendanceDetail
from .base import DayStatusStrategy, StatusDecision


class NoClassStrategy(DayStatusStrategy):
    """No class held (or nothing recorded) on this day."""

    def decide(self, *, detail: Optional[AttendanceDetail], late_threshold_minutes: int) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.NO_CLASS)
