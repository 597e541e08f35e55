from __future__ import annotations

from typing import Optional, Sequence

from ..common.datetime_utils import format_time, parse_time
from ..common.validators import require_day_of_week, require_positive_id
from ..core.enums import Role, ScheduleType
from ..core.exceptions import AuthorizationError, ValidationError
from .model import Schedule
from .repository import ScheduleRepository

_MANAGERS = (Role.TEACHER, Role.ADMIN, Role.SYSTEM_ADMIN)


class ScheduleService:
    def __init__(self, schedules: ScheduleRepository):
        self._schedules = schedules

    def list_for_section(self, section_id: int) -> Sequence[Schedule]:
        schedules = self._schedules.list_for_section(require_positive_id(section_id, "Section"))
        return sorted(schedules, key=lambda s: (s.day_of_week, s.time_start))

    def get(self, schedule_id: int) -> Optional[Schedule]:
        return self._schedules.get(require_positive_id(schedule_id, "Schedule"))

    def create(
        self,
        *,
        current_role: Role,
        section_id: int,
        day_of_week: int,
        time_start: str,
        time_end: str,
        room: Optional[str] = None,
        schedule_type: Optional[str] = None,
    ) -> Schedule:
        self._require_manager(current_role)
        payload = self._payload(
            section_id=section_id,
            day_of_week=day_of_week,
            time_start=time_start,
            time_end=time_end,
            room=room,
            schedule_type=schedule_type,
        )
        return self._schedules.create(payload)

    def update(
        self,
        *,
        current_role: Role,
        schedule_id: int,
        section_id: int,
        day_of_week: int,
        time_start: str,
        time_end: str,
        room: Optional[str] = None,
        schedule_type: Optional[str] = None,
    ) -> Schedule:
        self._require_manager(current_role)
        payload = self._payload(
            section_id=section_id,
            day_of_week=day_of_week,
            time_start=time_start,
            time_end=time_end,
            room=room,
            schedule_type=schedule_type,
        )
        return self._schedules.update(require_positive_id(schedule_id, "Schedule"), payload)

    def delete(self, *, current_role: Role, schedule_id: int) -> None:
        self._require_manager(current_role)
        self._schedules.delete(require_positive_id(schedule_id, "Schedule"))

    @staticmethod
    def _require_manager(role: Role) -> None:
        if role not in _MANAGERS:
            raise AuthorizationError("You don't have permission to manage schedules")

    @staticmethod
    def _payload(
        *,
        section_id: int,
        day_of_week: int,
        time_start: str,
        time_end: str,
        room: Optional[str],
        schedule_type: Optional[str],
    ) -> dict:
        try:
            start = parse_time(time_start)
            end = parse_time(time_end)
        except ValueError:
            raise ValidationError("Time must be in HH:MM format")
        if start is None or end is None:
            raise ValidationError("Start and end time are required")
        if end <= start:
            raise ValidationError("End time must be after start time")

        try:
            stype = ScheduleType((schedule_type or ScheduleType.LEC.value).strip().upper())
        except ValueError:
            raise ValidationError("Schedule type must be LEC, LAB or REC")

        return {
            "sectionId": require_positive_id(section_id, "Section"),
            "dayOfWeek": require_day_of_week(day_of_week),
            "timeStart": format_time(start),
            "timeEnd": format_time(end),
            "room": (room or "").strip() or "No Room",
            "scheduleType": stype.value,
        }
