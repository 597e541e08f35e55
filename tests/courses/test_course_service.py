from __future__ import annotations

import pytest

from spot.core.enums import Role
from spot.core.exceptions import AuthorizationError, ValidationError
from spot.courses.http_course_repository import HttpCourseRepository
from spot.courses.service import CourseService
from support import course_json


def test_admin_creates_course_with_upper_case_code(api_client, fake_http):
    fake_http.ok("POST", "/courses", course_json(5, "IT341"))

    course = CourseService(HttpCourseRepository(api_client)).create(
        current_role=Role.ADMIN, course_name=" Systems Integration ", course_code="it341"
    )

    assert fake_http.calls[0].json == {
        "courseName": "Systems Integration",
        "courseCode": "IT341",
        "courseDescription": "",
    }
    assert course.course_id == 5


def test_teacher_cannot_create_course(api_client, fake_http):
    with pytest.raises(AuthorizationError):
        CourseService(HttpCourseRepository(api_client)).create(
            current_role=Role.TEACHER, course_name="X", course_code="X1"
        )
    assert fake_http.calls == []


def test_course_name_is_required(api_client):
    with pytest.raises(ValidationError):
        CourseService(HttpCourseRepository(api_client)).create(
            current_role=Role.ADMIN, course_name="", course_code="X1"
        )


def test_list_is_sorted_by_code(api_client, fake_http):
    fake_http.ok("GET", "/courses", [course_json(2, "IT342"), course_json(1, "CS101")])

    courses = CourseService(HttpCourseRepository(api_client)).list_all()

    assert [c.course_code for c in courses] == ["CS101", "IT342"]


def test_list_failure_is_empty(api_client, fake_http):
    fake_http.fail("GET", "/courses", 503)

    assert CourseService(HttpCourseRepository(api_client)).list_all() == []
