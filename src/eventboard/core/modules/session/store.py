import threading
from datetime import datetime

from eventboard.core.modules.session.models import AuthToken


class SessionStore:
    """In-memory table of auth token to expiry time.

    One instance lives for the lifetime of the process and is handed to the
    session service by the Core. Nothing is persisted: a restart logs everyone out.
    """

    def __init__(self) -> None:
        self._expires_at: dict[AuthToken, datetime] = {}
        self._lock = threading.Lock()

    def put(self, token: AuthToken, expires_at: datetime) -> None:
        with self._lock:
            self._expires_at[token] = expires_at

    def get(self, token: AuthToken) -> datetime | None:
        with self._lock:
            return self._expires_at.get(token)

    def remove(self, token: AuthToken) -> None:
        with self._lock:
            self._expires_at.pop(token, None)

    def remove_expired(self, now: datetime) -> int:
        """Drop entries whose expiry is not after `now`, return how many were dropped."""
        with self._lock:
            expired = [token for token, expires_at in self._expires_at.items() if expires_at <= now]
            for token in expired:
                del self._expires_at[token]
            return len(expired)

    def __len__(self) -> int:
        with self._lock:
            return len(self._expires_at)
