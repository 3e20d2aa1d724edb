"""
Token storage for the API client.

Tokens live in memory and, when a path is given, are mirrored to a small
JSON file so a CLI session survives restarts.
"""

import json
import logging
import os
import threading
from typing import Optional

ACCESS_KEY = "access_token"
REFRESH_KEY = "refresh_token"
LEGACY_KEY = "admin_token"

logger = logging.getLogger(__name__)


class TokenStore:
    def __init__(self, path: Optional[str] = None):
        self.path = path
        self._lock = threading.Lock()
        self._data = {}
        if path and os.path.exists(path):
            try:
                with open(path, "r", encoding="utf-8") as fh:
                    loaded = json.load(fh)
            except ValueError:
                logger.warning("Ignoring unreadable token file %s", path)
                loaded = {}
            if isinstance(loaded, dict):
                self._data = loaded

    def _persist(self):
        if not self.path:
            return
        with open(self.path, "w", encoding="utf-8") as fh:
            json.dump(self._data, fh)

    @property
    def access_token(self) -> Optional[str]:
        return self._data.get(ACCESS_KEY)

    @property
    def refresh_token(self) -> Optional[str]:
        return self._data.get(REFRESH_KEY)

    def set_tokens(self, access_token: str, refresh_token: str) -> None:
        with self._lock:
            self._data[ACCESS_KEY] = access_token
            self._data[REFRESH_KEY] = refresh_token
            self._persist()

    def set_access_token(self, access_token: str) -> None:
        with self._lock:
            self._data[ACCESS_KEY] = access_token
            self._persist()

    def clear(self) -> None:
        with self._lock:
            for key in (ACCESS_KEY, REFRESH_KEY, LEGACY_KEY):
                self._data.pop(key, None)
            self._persist()

    def is_authenticated(self) -> bool:
        return bool(self.access_token)
