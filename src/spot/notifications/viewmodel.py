from __future__ import annotations

from ..core.state import StateHolder
from .service import NotificationService


class NotificationViewModel:
    def __init__(self, service: NotificationService, owner_id: int):
        self._service = service
        self._owner_id = int(owner_id)
        self.notifications: StateHolder[list] = StateHolder("notifications")

    @property
    def unread_count(self) -> int:
        return self._service.unread_count(self._owner_id)

    def load(self):
        return self.notifications.load(lambda: list(self._service.list(self._owner_id)))

    def mark_read(self, notification_id: str):
        self._service.mark_read(self._owner_id, notification_id)
        return self.load()

    def mark_all_read(self):
        self._service.mark_all_read(self._owner_id)
        return self.load()

    def delete(self, notification_id: str):
        self._service.delete(self._owner_id, notification_id)
        return self.load()

    def clear_all(self):
        self._service.clear_all(self._owner_id)
        return self.load()
