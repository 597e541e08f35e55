from __future__ import annotations

import pytest

from spot.http.client import ApiClient
from spot.http.connection import ApiConfig, ApiConnection
from spot.http.tokens import MemoryTokenStore
from support import BASE_URL, FakeHttpSession


@pytest.fixture
def fake_http() -> FakeHttpSession:
    return FakeHttpSession()


@pytest.fixture
def tokens() -> MemoryTokenStore:
    store = MemoryTokenStore()
    store.save(token="jwt-token", user_id=7, role="STUDENT", email="ana@cit.edu", name="Ana Cruz")
    return store


@pytest.fixture
def api_client(fake_http, tokens) -> ApiClient:
    return ApiClient(ApiConnection(ApiConfig(base_url=BASE_URL, timeout=5), session=fake_http), tokens)
