from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import requests

from ..core.constants import DEFAULT_TIMEOUT_SECONDS


@dataclass
class ApiConfig:
    base_url: str
    timeout: float = DEFAULT_TIMEOUT_SECONDS

    def url(self, path: str) -> str:
        return f"{self.base_url.rstrip('/')}/{path.lstrip('/')}"


class ApiConnection:
    """Singleton-like factory for the HTTP session shared by all API modules.

    Note: one `requests.Session` per process keeps connection pooling.
    """

    _instance: Optional["ApiConnection"] = None

    def __init__(self, config: ApiConfig, session: Optional[requests.Session] = None):
        self.config = config
        self._session = session

    @classmethod
    def get_instance(cls, config: ApiConfig) -> "ApiConnection":
        if cls._instance is None or cls._instance.config != config:
            cls._instance = ApiConnection(config)
        return cls._instance

    def session(self) -> requests.Session:
        if self._session is None:
            s = requests.Session()
            s.headers.update({"Content-Type": "application/json", "Accept": "application/json"})
            self._session = s
        return self._session
