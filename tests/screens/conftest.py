from __future__ import annotations

import pytest

from spot.http.connection import ApiConfig, ApiConnection
from spot.main import create_app
from support import BASE_URL


@pytest.fixture
def app(monkeypatch, fake_http):
    monkeypatch.setenv("APP_ENV", "testing")
    return create_app(connection=ApiConnection(ApiConfig(base_url=BASE_URL, timeout=5), session=fake_http))


@pytest.fixture
def web(app):
    return app.test_client()
