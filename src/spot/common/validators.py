from __future__ import annotations

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_min_length(value: str, field_name: str, min_len: int) -> str:
    if value is None or len(value) < min_len:
        raise ValidationError(f"{field_name} must be at least {min_len} characters")
    return value


def require_positive_id(value, field_name: str) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} is invalid")
    if number <= 0:
        raise ValidationError(f"{field_name} is invalid")
    return number


def require_day_of_week(value) -> int:
    try:
        day = int(value)
    except (TypeError, ValueError):
        raise ValidationError("Day of week must be between 1 and 7")
    if not 1 <= day <= 7:
        raise ValidationError("Day of week must be between 1 and 7")
    return day
