from __future__ import annotations

from dataclasses import dataclass, field
from datetime import time

import pytest

from spot.core.enums import Role, ScheduleType
from spot.core.exceptions import AuthorizationError, ValidationError
from spot.schedules.model import Schedule
from spot.schedules.service import ScheduleService


@dataclass
class FakeScheduleRepo:
    schedules: list = field(default_factory=list)
    created: list = field(default_factory=list)

    def list_for_section(self, section_id: int):
        return [s for s in self.schedules if s.section_id == section_id]

    def create(self, payload: dict) -> Schedule:
        self.created.append(payload)
        return Schedule.from_api({"id": len(self.created), **payload})


def _create(service, **overrides):
    values = dict(current_role=Role.TEACHER, section_id=42, day_of_week=1, time_start="07:30", time_end="09:00")
    values.update(overrides)
    return service.create(**values)


def test_create_sends_normalized_payload():
    repo = FakeScheduleRepo()

    schedule = _create(ScheduleService(repo), time_start="7:30 AM", room="  ", schedule_type="lab")

    assert repo.created == [
        {
            "sectionId": 42,
            "dayOfWeek": 1,
            "timeStart": "07:30",
            "timeEnd": "09:00",
            "room": "No Room",
            "scheduleType": "LAB",
        }
    ]
    assert schedule.schedule_type == ScheduleType.LAB
    assert schedule.time_start == time(7, 30)


@pytest.mark.parametrize(
    "overrides, message",
    [
        ({"time_end": "07:00"}, "End time must be after start time"),
        ({"time_start": "soon"}, "Time must be in HH:MM format"),
        ({"day_of_week": 8}, "Day of week must be between 1 and 7"),
        ({"schedule_type": "SEM"}, "Schedule type must be LEC, LAB or REC"),
        ({"time_end": ""}, "Start and end time are required"),
    ],
)
def test_invalid_input(overrides, message):
    repo = FakeScheduleRepo()

    with pytest.raises(ValidationError) as exc:
        _create(ScheduleService(repo), **overrides)

    assert str(exc.value) == message
    assert repo.created == []


def test_students_cannot_manage_schedules():
    with pytest.raises(AuthorizationError):
        _create(ScheduleService(FakeScheduleRepo()), current_role=Role.STUDENT)


def test_list_is_ordered_by_day_then_time():
    repo = FakeScheduleRepo(
        schedules=[
            Schedule(1, 42, 3, time(8, 0), time(9, 0)),
            Schedule(2, 42, 1, time(13, 0), time(14, 0)),
            Schedule(3, 42, 1, time(8, 0), time(9, 0)),
        ]
    )

    assert [s.schedule_id for s in ScheduleService(repo).list_for_section(42)] == [3, 2, 1]
