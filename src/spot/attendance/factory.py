from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.constants import LATE_THRESHOLD_MINUTES
from .model import AttendanceDetail
from .strategies.absent_strategy import AbsentStrategy
from .strategies.base import DayStatusStrategy
from .strategies.late_strategy import LateStrategy
from .strategies.no_class_strategy import NoClassStrategy
from .strategies.present_strategy import PresentStrategy


@dataclass
class DayStatusStrategyFactory:
    """Factory Pattern: choose the strategy that labels one day."""

    late_threshold_minutes: int = LATE_THRESHOLD_MINUTES

    def for_day(self, *, detail: Optional[AttendanceDetail], present: Optional[bool]) -> DayStatusStrategy:
        # Detailed data wins over the coarse per-date flag.
        if detail is not None:
            if not detail.present:
                return AbsentStrategy()
            if self.is_late(detail):
                return LateStrategy()
            return PresentStrategy()

        if present is None:
            return NoClassStrategy()
        return PresentStrategy() if present else AbsentStrategy()

    def is_late(self, detail: AttendanceDetail) -> bool:
        if detail.start_time is None or detail.schedule_start_time is None:
            return False
        anchor = date(2000, 1, 1)
        delay = datetime.combine(anchor, detail.start_time) - datetime.combine(anchor, detail.schedule_start_time)
        return delay.total_seconds() > self.late_threshold_minutes * 60
