from __future__ import annotations

from dataclasses import dataclass, field

import pytest

from spot.auth.model import AuthSession
from spot.auth.service import AuthService
from spot.core.enums import Role
from spot.core.exceptions import ValidationError
from spot.http.tokens import MemoryTokenStore


@dataclass
class FakeAuthRepo:
    calls: list = field(default_factory=list)

    def login(self, *, email: str, password: str) -> AuthSession:
        self.calls.append(("email", email))
        return AuthSession(token="jwt", user_id=3, role=Role.TEACHER, email=email, name="Ben Reyes")

    def login_with_student_id(self, *, physical_id: str, password: str) -> AuthSession:
        self.calls.append(("student_id", physical_id))
        return AuthSession(token="jwt", user_id=7, role=Role.STUDENT, email="", name="Ana Cruz")


def test_login_remembers_token_and_role():
    tokens = MemoryTokenStore()

    AuthService(FakeAuthRepo(), tokens).login(email=" ben@cit.edu ", password="secret1")

    assert tokens.get_token() == "jwt"
    assert tokens.get_user_id() == 3
    assert tokens.get_role() == "TEACHER"


def test_student_id_login():
    repo = FakeAuthRepo()
    tokens = MemoryTokenStore()

    AuthService(repo, tokens).login_with_student_id(physical_id="22-0007", password="secret1")

    assert repo.calls == [("student_id", "22-0007")]
    assert tokens.get_role() == "STUDENT"


def test_blank_fields_never_reach_the_backend():
    repo = FakeAuthRepo()

    with pytest.raises(ValidationError):
        AuthService(repo, MemoryTokenStore()).login(email="", password="secret1")
    assert repo.calls == []


def test_logout_clears_credentials():
    tokens = MemoryTokenStore()
    service = AuthService(FakeAuthRepo(), tokens)
    service.login(email="ben@cit.edu", password="secret1")

    service.logout()

    assert tokens.get_token() is None
    assert tokens.values == {}


def test_role_parsing():
    assert AuthSession.from_api({"accessToken": "t", "id": 1, "userType": "system-admin"}).role == Role.SYSTEM_ADMIN
    assert AuthSession.from_api({"accessToken": "t", "id": 1, "userType": None}).role == Role.STUDENT
