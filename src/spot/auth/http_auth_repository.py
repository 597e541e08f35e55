from __future__ import annotations

from ..core.exceptions import ApiError, AuthenticationError
from ..http.base import as_dict
from ..http.client import ApiClient
from .model import AuthSession
from .repository import AuthRepository


class HttpAuthRepository(AuthRepository):
    def __init__(self, client: ApiClient):
        self._client = client

    def login(self, *, email: str, password: str) -> AuthSession:
        return self._post("/auth/login", {"email": email, "password": password})

    def login_with_student_id(self, *, physical_id: str, password: str) -> AuthSession:
        return self._post("/auth/login/student-id", {"studentPhysicalId": physical_id, "password": password})

    def _post(self, path: str, payload: dict) -> AuthSession:
        try:
            data = self._client.post(path, json=payload)
        except ApiError as e:
            # A 401 here means bad credentials, not an expired session.
            if e.status_code in (400, 401, 404):
                raise AuthenticationError("Invalid credentials") from e
            raise
        r = as_dict(data)
        if not r or not r.get("accessToken"):
            raise AuthenticationError("Invalid credentials")
        return AuthSession.from_api(r)
