"""
HTTP client for the restaurant site API.

Wraps a requests session with bearer-token handling. When a request comes
back 401 and a refresh token is stored, the client refreshes the access
token and retries the request once. Refreshes are single-flight: callers
that fail with the same stale token share one POST /auth/refresh.
"""

import logging
import threading
from typing import Any, Callable, Dict, Optional

import requests

from restaurant_site.client.tokens import TokenStore

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30


class ApiError(Exception):
    def __init__(self, message: str, status: int, errors: Any = None):
        super().__init__(message)
        self.message = message
        self.status = status
        self.errors = errors

    def __repr__(self):
        return f"ApiError(status={self.status}, message={self.message!r})"


class ApiClient:
    def __init__(self, base_url: str, tokens: Optional[TokenStore] = None,
                 session: Optional[requests.Session] = None, timeout: float = DEFAULT_TIMEOUT,
                 on_session_expired: Optional[Callable[[], None]] = None):
        self.base_url = base_url.rstrip("/")
        self.tokens = tokens or TokenStore()
        self.session = session or requests.Session()
        self.timeout = timeout
        self.on_session_expired = on_session_expired
        self._refresh_lock = threading.Lock()

    def url(self, endpoint: str) -> str:
        return f"{self.base_url}{endpoint}"

    def request(self, method: str, endpoint: str, json: Any = None, params: Optional[Dict[str, Any]] = None,
                files: Optional[Dict[str, Any]] = None, data: Optional[Dict[str, Any]] = None) -> Any:
        url = self.url(endpoint)
        sent_token = self.tokens.access_token
        response = self._send(method, url, sent_token, json=json, params=params, files=files, data=data)

        if response.status_code == 401 and self.tokens.refresh_token:
            if self._refresh(sent_token):
                _rewind(files)
                retry = self._send(method, url, self.tokens.access_token,
                                   json=json, params=params, files=files, data=data)
                return self._handle(retry)

            if self.on_session_expired:
                self.on_session_expired()
            raise ApiError("Session expired. Please login again.", 401)

        return self._handle(response)

    def _send(self, method, url, token, **kwargs):
        headers = {"Accept": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"
        if kwargs.get("json") is None:
            kwargs.pop("json", None)
        try:
            return self.session.request(method, url, headers=headers, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            logger.warning("%s %s failed: %s", method, url, e)
            raise ApiError("Network error. Please check your connection.", 0) from e

    def _handle(self, response) -> Any:
        if not response.ok:
            try:
                body = response.json()
            except ValueError:
                body = {}
            if not isinstance(body, dict):
                body = {}
            raise ApiError(
                body.get("message") or f"Request failed with status {response.status_code}",
                response.status_code,
                body.get("errors"),
            )

        if response.status_code == 204:
            return {}

        try:
            return response.json()
        except ValueError as e:
            raise ApiError("Invalid JSON in response", response.status_code) from e

    def _refresh(self, stale_token: Optional[str]) -> bool:
        """
        Refresh the access token unless another caller already did.

        On failure the stored tokens are cleared while still holding the
        lock, so callers queued behind a failed refresh fail fast instead of
        issuing their own refresh.
        """
        with self._refresh_lock:
            current = self.tokens.access_token
            if current and current != stale_token:
                return True

            refresh_token = self.tokens.refresh_token
            if not refresh_token:
                return False

            if self._do_refresh(refresh_token):
                return True

            logger.info("Token refresh failed; clearing stored session")
            self.tokens.clear()
            return False

    def _do_refresh(self, refresh_token: str) -> bool:
        try:
            response = self.session.request(
                "POST",
                self.url("/auth/refresh"),
                json={"refresh_token": refresh_token},
                headers={"Accept": "application/json"},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.warning("Token refresh request failed: %s", e)
            return False

        if not response.ok:
            return False
        try:
            body = response.json()
        except ValueError:
            return False

        data = body.get("data") if isinstance(body, dict) else None
        access_token = data.get("access_token") if isinstance(data, dict) else None
        if not access_token:
            return False
        self.tokens.set_access_token(access_token)
        return True


def _rewind(files: Optional[Dict[str, Any]]) -> None:
    """Seek uploaded file objects back to the start before a retry."""
    if not files:
        return
    for value in files.values():
        fileobj = value[1] if isinstance(value, tuple) and len(value) > 1 else value
        if hasattr(fileobj, "seek"):
            fileobj.seek(0)
