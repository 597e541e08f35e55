from __future__ import annotations

import logging
from typing import Any, Optional

import requests

from ..core.exceptions import ApiError, SessionExpiredError
from .connection import ApiConnection
from .tokens import TokenStore

logger = logging.getLogger(__name__)

# Endpoints that must never carry a (possibly stale) bearer token.
PUBLIC_PATHS = ("/auth/login", "/auth/check-email")

NETWORK_ERROR = "Network error: Unable to connect to server"


class ApiClient:
    """Thin wrapper over the shared HTTP session.

    Attaches the bearer token, logs every failure in one place and turns
    HTTP/transport errors into `ApiError`. A 401 clears the stored credentials
    and raises `SessionExpiredError` so the app can force a new login.
    """

    def __init__(self, connection: ApiConnection, tokens: TokenStore):
        self._connection = connection
        self._tokens = tokens

    @property
    def tokens(self) -> TokenStore:
        return self._tokens

    def get(self, path: str, *, params: Optional[dict] = None) -> Any:
        return self.request("GET", path, params=params)

    def post(self, path: str, *, json: Any = None, params: Optional[dict] = None) -> Any:
        return self.request("POST", path, json=json, params=params)

    def put(self, path: str, *, json: Any = None, params: Optional[dict] = None) -> Any:
        return self.request("PUT", path, json=json, params=params)

    def delete(self, path: str, *, params: Optional[dict] = None) -> Any:
        return self.request("DELETE", path, params=params)

    def request(self, method: str, path: str, *, params: Optional[dict] = None, json: Any = None) -> Any:
        config = self._connection.config
        url = config.url(path)
        headers = {}
        token = self._tokens.get_token()
        if token and not any(p in path for p in PUBLIC_PATHS):
            headers["Authorization"] = f"Bearer {token}"

        logger.debug("%s %s params=%s auth=%s", method, url, params, "yes" if "Authorization" in headers else "no")
        try:
            response = self._connection.session().request(
                method,
                url,
                params=params,
                json=json,
                headers=headers,
                timeout=config.timeout,
            )
        except requests.exceptions.RequestException as exc:
            logger.error("No response from %s %s: %s", method, url, exc)
            raise ApiError(NETWORK_ERROR) from exc

        if response.status_code == 401:
            logger.warning("Unauthorized on %s %s, clearing credentials", method, url)
            self._tokens.clear()
            raise SessionExpiredError()

        body = _json_or_none(response)
        if not 200 <= response.status_code < 300:
            logger.error("API error %s %s status=%s body=%s", method, url, response.status_code, body or response.text)
            raise ApiError(_error_message(response.status_code, body), status_code=response.status_code)

        return unwrap(body)


def unwrap(body: Any) -> Any:
    """Return `data` from the backend envelope `{result, message, data}`.

    Falls back to the raw body when it is not enveloped.
    """

    if isinstance(body, dict) and "data" in body and ("result" in body or "message" in body):
        return body["data"]
    return body


def server_message(body: Any) -> Optional[str]:
    if isinstance(body, dict):
        message = body.get("message") or body.get("error")
        if isinstance(message, str) and message.strip():
            return message.strip()
    return None


def _json_or_none(response: requests.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return None


def _error_message(status_code: int, body: Any) -> str:
    if status_code == 403:
        return "Access denied: You don't have permission"
    if status_code >= 500:
        return "Server error: Please try again later"
    message = server_message(body)
    if message:
        return message
    if status_code == 400:
        return "Invalid request: Please try again"
    return f"Network error: HTTP {status_code}"
