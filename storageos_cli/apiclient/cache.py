# Copyright (c) 2026 StorageOS Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Reuse of authenticated sessions across CLI invocations."""

import json
import os
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Any, Callable, Dict, Optional

from storageos_cli.apiclient.transport import AuthSession, Transport
from storageos_cli.utils.logger import get_logger

logger = get_logger(__name__)

SESSION_CACHE_FILE = "sessions.json"
DEFAULT_EXPIRY_MARGIN = timedelta(seconds=5)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SessionCache:
    """Sessions stored as JSON in the cache directory, keyed by endpoint and username.

    A session is only handed out while more than ``margin`` of its lifetime
    remains. A corrupt cache file is treated as empty.
    """

    def __init__(
        self,
        cache_dir: str,
        clock: Callable[[], datetime] = _utcnow,
        margin: timedelta = DEFAULT_EXPIRY_MARGIN,
    ):
        self.path = Path(cache_dir).expanduser() / SESSION_CACHE_FILE
        self._clock = clock
        self._margin = margin

    @staticmethod
    def key(endpoint: str, username: str) -> str:
        return f"{endpoint}|{username}"

    def _read(self) -> Dict[str, Any]:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return {}
        except (OSError, ValueError) as e:
            logger.debug("ignoring unreadable session cache %s: %s", self.path, e)
            return {}
        return data if isinstance(data, dict) else {}

    def get(self, endpoint: str, username: str) -> Optional[AuthSession]:
        entry = self._read().get(self.key(endpoint, username))
        if not isinstance(entry, dict):
            return None
        try:
            expires_at = datetime.fromisoformat(entry["expiresAt"])
            token = entry["token"]
            remaining = expires_at - self._clock()
        except (KeyError, TypeError, ValueError):
            logger.debug("ignoring malformed cached session for %s", username)
            return None

        if remaining <= self._margin:
            logger.debug("cached session for %s expired", username)
            return None
        return AuthSession(token=token, expires_at=expires_at, user_id=entry.get("userID", ""))

    def put(self, endpoint: str, username: str, session: AuthSession) -> None:
        data = self._read()
        data[self.key(endpoint, username)] = {
            "token": session.token,
            "expiresAt": session.expires_at.isoformat(),
            "userID": session.user_id,
        }
        self.path.parent.mkdir(mode=0o700, parents=True, exist_ok=True)
        fd = os.open(self.path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(data, f)


class AuthCachedTransport:
    """Wraps a transport so ``authenticate`` reuses a cached session when one is valid.

    Every other operation is forwarded to the wrapped transport unchanged.
    """

    def __init__(self, inner: Transport, cache: SessionCache, endpoint: str):
        self.inner = inner
        self.cache = cache
        self.endpoint = endpoint

    def authenticate(self, username: str, password: str) -> AuthSession:
        session = self.cache.get(self.endpoint, username)
        if session is not None:
            logger.debug("using cached session for %s", username)
            self.inner.use_session(session)
            return session

        session = self.inner.authenticate(username, password)
        self.cache.put(self.endpoint, username, session)
        return session

    def __getattr__(self, name: str) -> Any:
        return getattr(self.inner, name)
