from __future__ import annotations

import json
import logging
import threading
from pathlib import Path
from typing import Callable, Dict, List, Sequence, TypeVar

from .model import Notification
from .repository import NotificationRepository

logger = logging.getLogger(__name__)

T = TypeVar("T")


class InMemoryNotificationRepository(NotificationRepository):
    def __init__(self):
        self._items: Dict[int, List[Notification]] = {}
        self._lock = threading.RLock()

    def load(self, owner_id: int) -> Sequence[Notification]:
        with self._lock:
            return list(self._items.get(int(owner_id), []))

    def save(self, owner_id: int, notifications: Sequence[Notification]) -> None:
        with self._lock:
            self._items[int(owner_id)] = list(notifications)

    def update(self, owner_id: int, change: Callable[[List[Notification]], T]) -> T:
        with self._lock:
            items = list(self.load(owner_id))
            result = change(items)
            self.save(owner_id, items)
            return result


class JsonFileNotificationRepository(NotificationRepository):
    """Keeps every user's log in one JSON document on disk."""

    def __init__(self, path: Path):
        self._path = Path(path)
        # Reentrant so `update` can hold it across `load` and `save`.
        self._lock = threading.RLock()

    def load(self, owner_id: int) -> Sequence[Notification]:
        with self._lock:
            rows = self._read().get(str(int(owner_id)), [])
        out: List[Notification] = []
        for r in rows:
            try:
                out.append(Notification.from_dict(r))
            except (KeyError, TypeError, ValueError):
                logger.warning("Skipping malformed notification entry: %r", r)
        return out

    def save(self, owner_id: int, notifications: Sequence[Notification]) -> None:
        with self._lock:
            doc = self._read()
            doc[str(int(owner_id))] = [n.to_dict() for n in notifications]
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp = self._path.with_suffix(self._path.suffix + ".tmp")
            tmp.write_text(json.dumps(doc, ensure_ascii=False, indent=2), encoding="utf-8")
            tmp.replace(self._path)

    def update(self, owner_id: int, change: Callable[[List[Notification]], T]) -> T:
        with self._lock:
            items = list(self.load(owner_id))
            result = change(items)
            self.save(owner_id, items)
            return result

    def _read(self) -> dict:
        if not self._path.exists():
            return {}
        try:
            doc = json.loads(self._path.read_text(encoding="utf-8") or "{}")
        except ValueError:
            logger.error("Notification store %s is corrupt, starting empty", self._path)
            return {}
        return doc if isinstance(doc, dict) else {}
