"""Month grid for the attendance calendar screen.

The grid always has 42 cells (6 weeks, Monday first). Cells that belong to
the neighbouring months pad the grid and are never classified.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import Mapping, Optional, Union

from ..common.datetime_utils import to_date
from ..core.constants import CALENDAR_CELLS, LATE_THRESHOLD_MINUTES
from ..core.enums import AttendanceStatus
from .factory import DayStatusStrategyFactory
from .model import AttendanceDetail, CalendarDay

DateKey = Union[date, str]


def _normalize(mapping: Optional[Mapping[DateKey, object]]) -> dict:
    if not mapping:
        return {}
    return {to_date(k): v for k, v in mapping.items()}


def create_calendar_days(
    month: date,
    attendance_by_date: Optional[Mapping[DateKey, bool]],
    attendance_details: Optional[Mapping[DateKey, AttendanceDetail]] = None,
    *,
    factory: Optional[DayStatusStrategyFactory] = None,
) -> list[CalendarDay]:
    factory = factory or DayStatusStrategyFactory(late_threshold_minutes=LATE_THRESHOLD_MINUTES)
    by_date = _normalize(attendance_by_date)
    details = _normalize(attendance_details)

    first = month.replace(day=1)
    start = first - timedelta(days=first.weekday())

    days: list[CalendarDay] = []
    for offset in range(CALENDAR_CELLS):
        day = start + timedelta(days=offset)
        if day.month != first.month or day.year != first.year:
            days.append(CalendarDay(date=day, in_current_month=False, status=AttendanceStatus.NO_CLASS))
            continue

        detail = details.get(day)
        strategy = factory.for_day(detail=detail, present=by_date.get(day))
        decision = strategy.decide(detail=detail, late_threshold_minutes=factory.late_threshold_minutes)
        days.append(CalendarDay(date=day, in_current_month=True, status=decision.status, detail=detail))
    return days


def count_by_status(days: list[CalendarDay]) -> dict[str, int]:
    counts = {s.value: 0 for s in AttendanceStatus}
    for d in days:
        if d.in_current_month:
            counts[d.status.value] += 1
    return counts
