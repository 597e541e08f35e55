from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..core.exceptions import ApiError, SessionExpiredError
from ..http.base import as_dict, as_list, list_or_empty
from ..http.client import ApiClient
from .model import Section
from .repository import SectionRepository

logger = logging.getLogger(__name__)


class HttpSectionRepository(SectionRepository):
    def __init__(self, client: ApiClient):
        self._client = client

    @list_or_empty
    def list_for_course(self, course_id: int) -> Sequence[Section]:
        data = self._client.get("/sections", params={"courseId": int(course_id)})
        return [Section.from_api(r) for r in as_list(data)]

    @list_or_empty
    def list_for_teacher(self, teacher_id: int) -> Sequence[Section]:
        data = self._client.get("/sections", params={"teacherId": int(teacher_id)})
        return [Section.from_api(r) for r in as_list(data)]

    @list_or_empty
    def list_all(self) -> Sequence[Section]:
        """Sections of every course; a course whose fetch fails is skipped."""

        courses = as_list(self._client.get("/courses"))
        out: list[Section] = []
        for course in courses:
            course_id = course.get("id")
            if course_id is None:
                continue
            try:
                data = self._client.get("/sections", params={"courseId": int(course_id)})
            except SessionExpiredError:
                raise
            except ApiError as e:
                logger.error("Error fetching sections for course %s: %s", course_id, e)
                continue
            out.extend(Section.from_api(r) for r in as_list(data))
        return out

    def get(self, section_id: int) -> Optional[Section]:
        r = as_dict(self._client.get(f"/sections/{int(section_id)}"))
        return Section.from_api(r) if r else None

    def get_by_enrollment_key(self, key: str) -> Optional[Section]:
        r = as_dict(self._client.get(f"/sections/enrollment-key/{key}"))
        return Section.from_api(r) if r else None

    def create(self, payload: dict) -> Section:
        r = as_dict(self._client.post("/sections", json=payload))
        if r is None:
            raise ApiError("Failed to create section")
        return Section.from_api(r)

    def update(self, section_id: int, payload: dict) -> Section:
        r = as_dict(self._client.put(f"/sections/{int(section_id)}", json=payload))
        if r is None:
            raise ApiError("Failed to update section")
        return Section.from_api(r)

    def delete(self, section_id: int) -> None:
        self._client.delete(f"/sections/{int(section_id)}")

    def assign_teacher(self, *, section_id: int, teacher_id: int) -> None:
        self._client.post(f"/sections/{int(section_id)}/assign", params={"teacherId": int(teacher_id)})

    def end_section(self, section_id: int) -> None:
        self._client.post(f"/sections/{int(section_id)}/end")

    def open_enrollment(self, section_id: int) -> None:
        self._client.post(f"/sections/{int(section_id)}/open")

    def close_enrollment(self, section_id: int) -> None:
        self._client.post(f"/sections/{int(section_id)}/close")
