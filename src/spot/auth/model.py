from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ..core.enums import Role


@dataclass(frozen=True)
class AuthSession:
    """What a successful login hands back: bearer token plus identity."""

    token: str
    user_id: int
    role: Role
    email: str
    name: str
    google_linked: bool = False

    @classmethod
    def from_api(cls, r: Mapping[str, Any]) -> "AuthSession":
        return cls(
            token=r["accessToken"],
            user_id=int(r["id"]),
            role=Role.parse(r.get("userType")),
            email=r.get("email") or "",
            name=r.get("name") or "",
            google_linked=bool(r.get("googleLinked", False)),
        )
