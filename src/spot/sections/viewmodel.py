from __future__ import annotations

from ..core.state import StateHolder
from .service import SectionService


class SectionsViewModel:
    def __init__(self, service: SectionService):
        self._service = service
        self.sections: StateHolder[list] = StateHolder("sections")
        self.detail: StateHolder[dict] = StateHolder("section_detail")

    def load_for_teacher(self, teacher_id: int):
        return self.sections.load(lambda: list(self._service.list_for_teacher(teacher_id)))

    def load_for_course(self, course_id: int):
        return self.sections.load(lambda: list(self._service.list_for_course(course_id)))

    def load_all(self):
        return self.sections.load(lambda: list(self._service.list_all()))

    def load_detail(self, section_id: int):
        def fetch() -> dict:
            section, schedules = self._service.get_with_schedules(section_id)
            return {"section": section, "schedules": list(schedules)}

        return self.detail.load(fetch)
