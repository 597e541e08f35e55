from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any, Mapping, Optional

from ..core.enums import NotificationType


@dataclass(frozen=True)
class Notification:
    notification_id: str
    title: str
    message: str
    type: NotificationType
    timestamp: datetime
    is_read: bool = False
    related_entity_id: Optional[int] = None

    def mark_read(self) -> "Notification":
        return replace(self, is_read=True)

    def to_dict(self) -> dict:
        return {
            "id": self.notification_id,
            "title": self.title,
            "message": self.message,
            "type": self.type.value,
            "timestamp": self.timestamp.isoformat(),
            "isRead": self.is_read,
            "relatedEntityId": self.related_entity_id,
        }

    @classmethod
    def from_dict(cls, r: Mapping[str, Any]) -> "Notification":
        try:
            ntype = NotificationType(r.get("type") or "SYSTEM")
        except ValueError:
            ntype = NotificationType.SYSTEM
        related = r.get("relatedEntityId")
        return cls(
            notification_id=str(r["id"]),
            title=r.get("title") or "",
            message=r.get("message") or "",
            type=ntype,
            timestamp=datetime.fromisoformat(r["timestamp"]),
            is_read=bool(r.get("isRead", False)),
            related_entity_id=int(related) if related is not None else None,
        )
