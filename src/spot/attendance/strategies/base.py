from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from ...core.enums import AttendanceStatus
from ..model import AttendanceDetail


@dataclass(frozen=True)
class StatusDecision:
    status: AttendanceStatus
    note: Optional[str] = None


class DayStatusStrategy(ABC):
    """Strategy Pattern: encapsulate how one calendar day is labelled."""

    @abstractmethod
    def decide(self, *, detail: Optional[AttendanceDetail], late_threshold_minutes: int) -> StatusDecision:
        raise NotImplementedError
