from __future__ import annotations

import re
from datetime import date, datetime, time
from typing import Optional, Union

_AMPM_PATTERN = re.compile(r"(\d{1,2}):(\d{2})\s*([AP]M)", re.IGNORECASE)


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def to_date(value: Union[date, str]) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return parse_iso_date(str(value).strip()[:10])


def parse_time(value: Union[time, str, None]) -> Optional[time]:
    """Parse backend LocalTime values.

    Accepts "HH:MM", "HH:MM:SS(.fff)", ISO date-times ("...T08:30:00") and
    12-hour strings like "7:30AM" or "9:00 PM". Returns None for blanks.
    """

    if value is None:
        return None
    if isinstance(value, time):
        return value

    text = str(value).strip()
    if not text:
        return None
    if "T" in text:
        text = text.split("T", 1)[1]

    match = _AMPM_PATTERN.search(text)
    if match:
        hour, minute, meridiem = int(match.group(1)), int(match.group(2)), match.group(3).upper()
        if meridiem == "PM" and hour < 12:
            hour += 12
        elif meridiem == "AM" and hour == 12:
            hour = 0
        return time(hour=hour, minute=minute)

    parts = text.split(":")
    if len(parts) < 2:
        raise ValueError(f"Invalid time string: {value!r}")
    hours = int(parts[0])
    minutes = int(parts[1])
    seconds = int(float(parts[2])) if len(parts) >= 3 and parts[2] else 0
    return time(hour=hours, minute=minutes, second=seconds)


def format_time(value: Optional[time]) -> str:
    return value.strftime("%H:%M") if value else ""


def format_time_12h(value: Optional[time]) -> str:
    if not value:
        return ""
    return value.strftime("%I:%M%p").lstrip("0")


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()
