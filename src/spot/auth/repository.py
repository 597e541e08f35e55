from __future__ import annotations

from typing import Protocol

from .model import AuthSession


class AuthRepository(Protocol):
    def login(self, *, email: str, password: str) -> AuthSession:
        raise NotImplementedError

    def login_with_student_id(self, *, physical_id: str, password: str) -> AuthSession:
        raise NotImplementedError
