from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, MutableMapping, Optional, Protocol

from flask import session


class TokenStore(Protocol):
    """Where the bearer token and the logged-in user's identity live."""

    def get_token(self) -> Optional[str]:
        raise NotImplementedError

    def get_user_id(self) -> Optional[int]:
        raise NotImplementedError

    def get_role(self) -> Optional[str]:
        raise NotImplementedError

    def save(self, *, token: str, user_id: int, role: str, email: str, name: str) -> None:
        raise NotImplementedError

    def clear(self) -> None:
        raise NotImplementedError


_KEYS = ("token", "user_id", "role", "email", "name")


class MappingTokenStore:
    """Token store over any mutable mapping (a dict, or the Flask session)."""

    def __init__(self, data: MutableMapping[str, Any]):
        self._data = data

    def get_token(self) -> Optional[str]:
        return self._data.get("token")

    def get_user_id(self) -> Optional[int]:
        value = self._data.get("user_id")
        return int(value) if value is not None else None

    def get_role(self) -> Optional[str]:
        return self._data.get("role")

    def get(self, key: str) -> Any:
        return self._data.get(key)

    def save(self, *, token: str, user_id: int, role: str, email: str, name: str) -> None:
        self._data["token"] = token
        self._data["user_id"] = int(user_id)
        self._data["role"] = role
        self._data["email"] = email
        self._data["name"] = name

    def clear(self) -> None:
        for key in _KEYS:
            self._data.pop(key, None)


@dataclass
class MemoryTokenStore(MappingTokenStore):
    values: dict = field(default_factory=dict)

    def __post_init__(self):
        super().__init__(self.values)


class SessionTokenStore(MappingTokenStore):
    """Token store over the Flask session.

    `session` is a proxy that resolves to the current request's session on
    every access, so one instance serves all requests.
    """

    def __init__(self):
        super().__init__(session)
