from __future__ import annotations

from typing import Callable, List, Protocol, Sequence, TypeVar

from .model import Notification

T = TypeVar("T")


class NotificationRepository(Protocol):
    """Local activity log storage, one newest-first list per user."""

    def load(self, owner_id: int) -> Sequence[Notification]:
        raise NotImplementedError

    def save(self, owner_id: int, notifications: Sequence[Notification]) -> None:
        raise NotImplementedError

    def update(self, owner_id: int, change: Callable[[List[Notification]], T]) -> T:
        """Run `change` on the user's list and persist it as one atomic step.

        `change` edits the list in place; its return value is passed back.
        """
        raise NotImplementedError
