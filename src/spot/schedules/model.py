from __future__ import annotations

from dataclasses import dataclass
from datetime import time
from typing import Any, Mapping

from ..common.datetime_utils import format_time_12h, parse_time
from ..core.enums import ScheduleType

DAY_NAMES = {
    1: "Monday",
    2: "Tuesday",
    3: "Wednesday",
    4: "Thursday",
    5: "Friday",
    6: "Saturday",
    7: "Sunday",
}


@dataclass(frozen=True)
class Schedule:
    """A recurring weekly slot of a section (day 1 = Monday ... 7 = Sunday)."""

    _extra_json = ("day_name", "label")

    schedule_id: int
    section_id: int
    day_of_week: int
    time_start: time
    time_end: time
    room: str = "No Room"
    schedule_type: ScheduleType = ScheduleType.LEC

    @property
    def day_name(self) -> str:
        return DAY_NAMES.get(self.day_of_week, "?")

    @property
    def label(self) -> str:
        return (
            f"{self.day_name[:3]} {format_time_12h(self.time_start)}-{format_time_12h(self.time_end)}"
            f" ({self.schedule_type.value}, {self.room})"
        )

    @classmethod
    def from_api(cls, r: Mapping[str, Any]) -> "Schedule":
        try:
            schedule_type = ScheduleType((r.get("scheduleType") or "LEC").upper())
        except ValueError:
            schedule_type = ScheduleType.LEC
        return cls(
            schedule_id=int(r["id"]),
            section_id=int(r.get("sectionId") or 0),
            day_of_week=int(r["dayOfWeek"]),
            time_start=parse_time(r.get("timeStart")) or time(0, 0),
            time_end=parse_time(r.get("timeEnd")) or time(0, 0),
            room=r.get("room") or "No Room",
            schedule_type=schedule_type,
        )
