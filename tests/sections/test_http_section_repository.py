from __future__ import annotations

import pytest

from spot.core.exceptions import SessionExpiredError
from spot.sections.http_section_repository import HttpSectionRepository
from spot.sections.model import Section
from support import FakeResponse, course_json, envelope, section_json


def _sections_by_course(call):
    course_id = call.params["courseId"]
    if course_id == 2:
        return FakeResponse(500, {"result": "ERROR", "message": "boom", "data": None})
    return FakeResponse(200, envelope([section_json(section_id=course_id * 10, course_id=course_id)]))


def test_list_all_skips_failing_course(api_client, fake_http):
    fake_http.ok("GET", "/courses", [course_json(1), course_json(2), course_json(3)])
    fake_http.handle("GET", "/sections", _sections_by_course)

    sections = HttpSectionRepository(api_client).list_all()

    assert [s.section_id for s in sections] == [10, 30]
    assert len(fake_http.calls_to("GET", "/sections")) == 3


def test_list_all_stops_on_session_expiry(api_client, fake_http):
    fake_http.ok("GET", "/courses", [course_json(1)])
    fake_http.fail("GET", "/sections", 401)

    with pytest.raises(SessionExpiredError):
        HttpSectionRepository(api_client).list_all()


def test_list_for_teacher_uses_query(api_client, fake_http):
    fake_http.ok("GET", "/sections", [section_json()])

    [section] = HttpSectionRepository(api_client).list_for_teacher(3)

    assert fake_http.calls[0].params == {"teacherId": 3}
    assert section.course_name == "Systems Integration"
    assert section.instructor_name == "Ben Reyes"
    assert section.enrollment_open is True


def test_section_without_teacher():
    data = section_json()
    data["teacher"] = None
    section = Section.from_api(data)

    assert section.instructor_name == "Not Assigned"
    assert section.teacher_id is None
