from __future__ import annotations

from typing import Optional, Sequence

from ..core.exceptions import ApiError
from ..http.base import as_dict, as_list, list_or_empty
from ..http.client import ApiClient
from .model import Schedule
from .repository import ScheduleRepository


class HttpScheduleRepository(ScheduleRepository):
    def __init__(self, client: ApiClient):
        self._client = client

    @list_or_empty
    def list_for_section(self, section_id: int) -> Sequence[Schedule]:
        data = self._client.get("/schedules", params={"sectionId": int(section_id)})
        return [Schedule.from_api(r) for r in as_list(data)]

    def get(self, schedule_id: int) -> Optional[Schedule]:
        r = as_dict(self._client.get(f"/schedules/{int(schedule_id)}"))
        return Schedule.from_api(r) if r else None

    def create(self, payload: dict) -> Schedule:
        r = as_dict(self._client.post("/schedules", json=payload))
        if r is None:
            raise ApiError("Failed to create schedule")
        return Schedule.from_api(r)

    def update(self, schedule_id: int, payload: dict) -> Schedule:
        r = as_dict(self._client.put(f"/schedules/{int(schedule_id)}", json=payload))
        if r is None:
            raise ApiError("Failed to update schedule")
        return Schedule.from_api(r)

    def delete(self, schedule_id: int) -> None:
        self._client.delete(f"/schedules/{int(schedule_id)}")
