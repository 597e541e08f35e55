from __future__ import annotations

from typing import Optional, Sequence

from ..core.exceptions import ApiError
from ..http.base import as_dict, as_list, list_or_empty
from ..http.client import ApiClient
from .model import Seat, SeatMap
from .repository import SeatRepository


class HttpSeatRepository(SeatRepository):
    def __init__(self, client: ApiClient):
        self._client = client

    @list_or_empty
    def list_for_section(self, section_id: int) -> Sequence[Seat]:
        data = self._client.get(f"/seats/section/{int(section_id)}")
        return [Seat.from_api(r) for r in as_list(data)]

    def get_map(self, section_id: int) -> SeatMap:
        r = as_dict(self._client.get(f"/seats/{int(section_id)}/map"))
        if r is None:
            return SeatMap.from_api({})
        return SeatMap.from_api(r)

    def get_student_seat(self, *, student_id: int, section_id: int) -> Optional[Seat]:
        try:
            data = self._client.get(
                "/seats/student", params={"studentId": int(student_id), "sectionId": int(section_id)}
            )
        except ApiError as e:
            # No seat picked yet.
            if e.status_code == 404:
                return None
            raise
        r = as_dict(data)
        return Seat.from_api(r) if r else None

    def pick(self, *, student_id: int, section_id: int, row: int, column: int) -> Seat:
        return self._write("/seats/pick", student_id=student_id, section_id=section_id, row=row, column=column)

    def override(self, *, student_id: int, section_id: int, row: int, column: int) -> Seat:
        return self._write("/seats/override", student_id=student_id, section_id=section_id, row=row, column=column)

    def _write(self, path: str, *, student_id: int, section_id: int, row: int, column: int) -> Seat:
        payload = {
            "studentId": int(student_id),
            "sectionId": int(section_id),
            "row": int(row),
            "column": int(column),
        }
        r = as_dict(self._client.post(path, json=payload))
        if r is None:
            raise ApiError("Failed to save seat")
        return Seat.from_api(r)
