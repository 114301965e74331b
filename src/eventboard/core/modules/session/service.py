import asyncio
import contextlib
import secrets
from collections.abc import Callable
from datetime import datetime
from typing import Any

import structlog
from pymongo.asynchronous.database import AsyncDatabase

from eventboard.core.core import Service
from eventboard.core.modules.session.models import SESSION_TTL, AuthToken
from eventboard.core.modules.session.store import SessionStore
from eventboard.utils import now

logger = structlog.get_logger(__name__)


class SessionService(Service):
    """Issues, validates and revokes admin sessions held in a SessionStore.

    Expiry is checked on every validation and expired entries are not removed
    as a side effect. Stale entries are harmless because validation always
    re-checks the expiry time, and their number grows only with login
    frequency. An optional background sweep (``session_sweep_interval``) keeps
    the store small on long-running processes.
    """

    def __init__(
        self,
        database: AsyncDatabase[dict[str, Any]],
        store: SessionStore,
        clock: Callable[[], datetime] = now,
    ) -> None:
        super().__init__(database)
        self._store = store
        self._clock = clock
        self._sweep_task: asyncio.Task[None] | None = None

    async def on_start(self) -> None:
        interval = self.core.config.session_sweep_interval
        if interval > 0:
            self._sweep_task = asyncio.create_task(self._sweep_periodically(interval))
            logger.debug("session_sweep_started", interval=interval)

    async def on_stop(self) -> None:
        if self._sweep_task is not None:
            self._sweep_task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await self._sweep_task
            self._sweep_task = None

    def create_session(self) -> AuthToken:
        auth_token = AuthToken(secrets.token_urlsafe(32))
        expires_at = self._clock() + SESSION_TTL
        self._store.put(auth_token, expires_at)
        logger.info("session_created", expires_at=expires_at.isoformat(), active_sessions=len(self._store))
        return auth_token

    def validate_session(self, auth_token: AuthToken) -> bool:
        expires_at = self._store.get(auth_token)
        if expires_at is None:
            return False
        return self._clock() < expires_at

    def delete_session(self, auth_token: AuthToken) -> None:
        self._store.remove(auth_token)
        logger.info("session_deleted")

    def sweep_expired_sessions(self) -> int:
        """Remove expired sessions from the store."""
        removed = self._store.remove_expired(self._clock())
        if removed:
            logger.debug("sessions_swept", removed=removed, remaining=len(self._store))
        return removed

    async def _sweep_periodically(self, interval: int) -> None:
        while True:
            await asyncio.sleep(interval)
            try:
                self.sweep_expired_sessions()
            except Exception:
                logger.exception("session_sweep_failed")
