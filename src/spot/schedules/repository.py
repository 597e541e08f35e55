from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Schedule


class ScheduleRepository(Protocol):
    def list_for_section(self, section_id: int) -> Sequence[Schedule]:
        raise NotImplementedError

    def get(self, schedule_id: int) -> Optional[Schedule]:
        raise NotImplementedError

    def create(self, payload: dict) -> Schedule:
        raise NotImplementedError

    def update(self, schedule_id: int, payload: dict) -> Schedule:
        raise NotImplementedError

    def delete(self, schedule_id: int) -> None:
        raise NotImplementedError
