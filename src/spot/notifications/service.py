from __future__ import annotations

import logging
import uuid
from typing import Callable, Optional, Sequence

from ..common.datetime_utils import now_local
from ..common.validators import require_non_empty
from ..core.enums import NotificationType
from ..core.exceptions import ValidationError
from .model import Notification
from .repository import NotificationRepository

logger = logging.getLogger(__name__)


class NotificationService:
    def __init__(self, repo: NotificationRepository, *, clock: Callable = now_local):
        self._repo = repo
        self._clock = clock

    def list(self, owner_id: int) -> Sequence[Notification]:
        return list(self._repo.load(owner_id))

    def add(
        self,
        owner_id: int,
        *,
        title: str,
        message: str,
        type: NotificationType,
        related_entity_id: Optional[int] = None,
    ) -> Notification:
        notification = Notification(
            notification_id=uuid.uuid4().hex,
            title=require_non_empty(title, "Title"),
            message=require_non_empty(message, "Message"),
            type=type,
            timestamp=self._clock(),
            related_entity_id=related_entity_id,
        )
        # Newest first.
        self._repo.update(owner_id, lambda items: items.insert(0, notification))
        logger.debug("Notification added for user %s: %s", owner_id, title)
        return notification

    def mark_read(self, owner_id: int, notification_id: str) -> Notification:
        def change(items):
            for i, n in enumerate(items):
                if n.notification_id == notification_id:
                    items[i] = n.mark_read()
                    return items[i]
            raise ValidationError("Notification not found")

        return self._repo.update(owner_id, change)

    def mark_all_read(self, owner_id: int) -> None:
        def change(items):
            items[:] = [n.mark_read() for n in items]

        self._repo.update(owner_id, change)

    def delete(self, owner_id: int, notification_id: str) -> None:
        def change(items):
            remaining = [n for n in items if n.notification_id != notification_id]
            if len(remaining) == len(items):
                raise ValidationError("Notification not found")
            items[:] = remaining

        self._repo.update(owner_id, change)

    def clear_all(self, owner_id: int) -> None:
        self._repo.update(owner_id, lambda items: items.clear())

    def unread_count(self, owner_id: int) -> int:
        return sum(1 for n in self._repo.load(owner_id) if not n.is_read)


class ActivityLogger:
    """Writes one user's activity entries into the local notification log."""

    def __init__(self, notifications: NotificationService, owner_id: int):
        self._notifications = notifications
        self._owner_id = int(owner_id)

    def _log(self, ntype: NotificationType, title: str, message: str, related: Optional[int] = None) -> Notification:
        return self._notifications.add(
            self._owner_id, title=title, message=message, type=ntype, related_entity_id=related
        )

    def log_seat_selection(self, *, section_name: str, row: int, column: int, section_id: int) -> Notification:
        return self._log(
            NotificationType.SEAT_PLAN,
            "Seat Plan",
            f"Selected seat at row {row + 1}, column {column + 1} in {section_name}",
            section_id,
        )

    def log_attendance_recorded(self, *, section_name: str, date: str, section_id: int) -> Notification:
        return self._log(
            NotificationType.ATTENDANCE, "Attendance", f"Attendance recorded for {section_name} on {date}", section_id
        )

    def log_enrollment(self, *, course_name: str, section_name: str, section_id: int) -> Notification:
        return self._log(
            NotificationType.ENROLLMENT,
            "Enrollment",
            f"Successfully enrolled in {course_name} - {section_name}",
            section_id,
        )

    def log_profile_update(self, *, field_name: str) -> Notification:
        return self._log(
            NotificationType.PROFILE_UPDATE,
            "Profile Update",
            f"Updated profile information: {field_name}",
            self._owner_id,
        )

    def log_course_info(self, *, course_name: str, message: str, course_id: int) -> Notification:
        return self._log(NotificationType.COURSE, "Course", f"{course_name}: {message}", course_id)

    def log_section_info(self, *, section_name: str, message: str, section_id: int) -> Notification:
        return self._log(NotificationType.SECTION, "Section", f"{section_name}: {message}", section_id)

    def log_schedule_change(self, *, section_name: str, message: str, section_id: int) -> Notification:
        return self._log(NotificationType.SCHEDULE, "Schedule", f"{section_name}: {message}", section_id)

    def log_qr_scan(self, *, section_name: str, section_id: int) -> Notification:
        return self._log(
            NotificationType.ATTENDANCE, "Attendance", f"Scanned QR code for {section_name} attendance", section_id
        )

    def log_system(self, message: str) -> Notification:
        return self._log(NotificationType.SYSTEM, "System", message)
