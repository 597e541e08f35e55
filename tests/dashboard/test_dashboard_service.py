from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import pytest

from spot.core.exceptions import ApiError, SessionExpiredError
from spot.courses.model import Course
from spot.dashboard.service import DashboardService
from spot.sections.model import Section


@dataclass
class Listing:
    items: list
    error: Optional[Exception] = None

    def list_all(self):
        if self.error:
            raise self.error
        return list(self.items)

    def list_for_teacher(self, teacher_id: int):
        return self.list_all()


def _service(*, courses=None, sections=None, students=None, teachers=None):
    return DashboardService(
        courses=courses or Listing([]),
        sections=sections or Listing([]),
        students=students or Listing([]),
        teachers=teachers or Listing([]),
        attendance=None,
        enrollments=None,
    )


def test_one_failing_part_does_not_block_the_others():
    service = _service(
        courses=Listing([Course(1, "Systems Integration", "IT341")]),
        students=Listing([], error=ApiError("Server error: Please try again later", status_code=500)),
    )

    data = service.for_admin()

    assert data.parts["counts"] == {"courses": 1, "sections": 0, "students": 0, "teachers": 0}
    assert data.errors == {"students": "Server error: Please try again later"}
    assert data.to_dict()["errors"] == {"students": "Server error: Please try again later"}


def test_session_expiry_aborts_the_dashboard():
    service = _service(teachers=Listing([], error=SessionExpiredError()))

    with pytest.raises(SessionExpiredError):
        service.for_admin()


def test_teacher_total_students():
    sections = Listing([Section(1, "G01", enrollment_count=30), Section(2, "G02", enrollment_count=12)])

    data = _service(sections=sections).for_teacher(3)

    assert data.parts["total_students"] == 42
    assert data.errors == {}
