from __future__ import annotations

import logging

from ..common.validators import require_non_empty
from ..http.tokens import TokenStore
from .model import AuthSession
from .repository import AuthRepository

logger = logging.getLogger(__name__)


class AuthService:
    """Use case: log in against the backend and remember the bearer token."""

    def __init__(self, auth: AuthRepository, tokens: TokenStore):
        self._auth = auth
        self._tokens = tokens

    def login(self, *, email: str, password: str) -> AuthSession:
        email = require_non_empty(email, "Email")
        password = require_non_empty(password, "Password")
        return self._remember(self._auth.login(email=email, password=password))

    def login_with_student_id(self, *, physical_id: str, password: str) -> AuthSession:
        physical_id = require_non_empty(physical_id, "Student ID")
        password = require_non_empty(password, "Password")
        return self._remember(self._auth.login_with_student_id(physical_id=physical_id, password=password))

    def logout(self) -> None:
        self._tokens.clear()

    def _remember(self, auth: AuthSession) -> AuthSession:
        self._tokens.save(
            token=auth.token,
            user_id=auth.user_id,
            role=auth.role.value,
            email=auth.email,
            name=auth.name,
        )
        logger.info("User %s logged in as %s", auth.user_id, auth.role.value)
        return auth
