from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Optional

BASE_URL = "http://spot.test/api"


class FakeResponse:
    def __init__(self, status_code: int = 200, body: Any = None):
        self.status_code = status_code
        self._body = body
        self.content = b"" if body is None else json.dumps(body).encode("utf-8")
        self.text = self.content.decode("utf-8")

    def json(self):
        if self._body is None:
            raise ValueError("No JSON body")
        return self._body


def envelope(data: Any) -> dict:
    return {"result": "SUCCESS", "message": "OK", "data": data}


@dataclass
class Call:
    method: str
    path: str
    params: Optional[dict]
    json: Any
    headers: dict


@dataclass
class FakeHttpSession:
    """Stands in for `requests.Session`: canned responses keyed by (method, path)."""

    base_url: str = BASE_URL
    routes: dict = field(default_factory=dict)
    calls: list = field(default_factory=list)

    def add(self, method: str, path: str, status: int = 200, body: Any = None, *, raises: Optional[Exception] = None):
        self.routes[(method.upper(), path)] = raises if raises is not None else FakeResponse(status, body)

    def ok(self, method: str, path: str, data: Any) -> None:
        self.add(method, path, 200, envelope(data))

    def handle(self, method: str, path: str, handler) -> None:
        """Route to `handler(call) -> FakeResponse`, for answers that depend on params."""

        self.routes[(method.upper(), path)] = handler

    def fail(self, method: str, path: str, status: int, message: Optional[str] = None) -> None:
        body = {"result": "ERROR", "message": message, "data": None} if message else None
        self.add(method, path, status, body)

    def request(self, method, url, params=None, json=None, headers=None, timeout=None):
        path = url[len(self.base_url):]
        self.calls.append(Call(method.upper(), path, params, json, dict(headers or {})))
        found = self.routes.get((method.upper(), path))
        if found is None:
            return FakeResponse(404, {"result": "ERROR", "message": f"No route for {method} {path}", "data": None})
        if isinstance(found, Exception):
            raise found
        if callable(found):
            return found(self.calls[-1])
        return found

    def calls_to(self, method: str, path: str) -> list:
        return [c for c in self.calls if c.method == method.upper() and c.path == path]


def student_json(student_id: int = 7, first: str = "Ana", last: str = "Cruz") -> dict:
    return {
        "id": student_id,
        "firstName": first,
        "middleName": None,
        "lastName": last,
        "email": f"{first.lower()}@cit.edu",
        "studentPhysicalId": f"22-{student_id:04d}",
        "year": "3",
        "program": "BSIT",
    }


def course_json(course_id: int = 1, code: str = "IT341") -> dict:
    return {"id": course_id, "courseName": "Systems Integration", "courseCode": code, "courseDescription": ""}


def section_json(section_id: int = 42, course_id: int = 1, name: str = "G01") -> dict:
    return {
        "id": section_id,
        "course": course_json(course_id),
        "teacher": {
            "id": 3,
            "firstName": "Ben",
            "lastName": "Reyes",
            "email": "ben@cit.edu",
            "teacherPhysicalId": "T-3",
        },
        "sectionName": name,
        "enrollmentKey": "KEY42",
        "enrollmentOpen": True,
        "enrollmentCount": 30,
    }


def login_as(web, *, user_id: int = 7, role: str = "STUDENT") -> None:
    """Put a logged-in user into the Flask test client's session."""

    with web.session_transaction() as sess:
        sess["token"] = "jwt-token"
        sess["user_id"] = user_id
        sess["role"] = role
        sess["email"] = "ana@cit.edu"
        sess["name"] = "Ana Cruz"
