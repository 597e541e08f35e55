from __future__ import annotations

from typing import Optional, Sequence

from ..core.exceptions import ApiError
from ..http.base import as_dict, as_list, list_or_empty
from ..http.client import ApiClient
from .model import Course
from .repository import CourseRepository


class HttpCourseRepository(CourseRepository):
    def __init__(self, client: ApiClient):
        self._client = client

    @list_or_empty
    def list_all(self) -> Sequence[Course]:
        return [Course.from_api(r) for r in as_list(self._client.get("/courses"))]

    def get(self, course_id: int) -> Optional[Course]:
        r = as_dict(self._client.get(f"/courses/{int(course_id)}"))
        return Course.from_api(r) if r else None

    def create(self, payload: dict) -> Course:
        r = as_dict(self._client.post("/courses", json=payload))
        if r is None:
            raise ApiError("Failed to create course")
        return Course.from_api(r)

    def update(self, course_id: int, payload: dict) -> Course:
        r = as_dict(self._client.put(f"/courses/{int(course_id)}", json=payload))
        if r is None:
            raise ApiError("Failed to update course")
        return Course.from_api(r)

    def delete(self, course_id: int) -> None:
        self._client.delete(f"/courses/{int(course_id)}")
