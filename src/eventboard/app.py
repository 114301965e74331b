from collections.abc import AsyncGenerator, Callable
from contextlib import asynccontextmanager
from datetime import datetime
from importlib.metadata import version

import structlog

from eventboard.config import Config
from eventboard.core.core import Core
from eventboard.core.modules.event.models import Event, EventFields
from eventboard.core.modules.session.models import AuthToken
from eventboard.errors import AuthenticationError
from eventboard.utils import now

logger = structlog.get_logger(__name__)


class App:
    """Facade for all application operations, checks authentication before delegating to Core."""

    def __init__(self, config: Config, clock: Callable[[], datetime] = now) -> None:
        self._core = Core(config, clock)

    @asynccontextmanager
    async def lifespan(self) -> AsyncGenerator[None]:
        """Application lifespan management - delegates to Core."""
        async with self._core.lifespan():
            yield

    @property
    def config(self) -> Config:
        return self._core.config

    # === Authentication ===
    def is_auth_token_valid(self, auth_token: AuthToken | None) -> bool:
        """Check if authentication token belongs to a live session."""
        if auth_token is None:
            return False
        return self._core.services.session.validate_session(auth_token)

    def login(self, password: str) -> AuthToken:
        """Check the shared admin password and open a new session."""
        if not self._core.services.access.verify_password(password):
            logger.info("login_failed")
            raise AuthenticationError("Invalid password")
        return self._core.services.session.create_session()

    def logout(self, auth_token: AuthToken | None) -> None:
        """End the session if a token was presented; unknown or expired tokens are ignored."""
        if auth_token is not None:
            self._core.services.session.delete_session(auth_token)

    # === Events ===
    async def get_events(self, include_past: bool = False) -> list[Event]:
        return await self._core.services.event.list_events(include_past)

    async def get_event(self, event_id: str) -> Event:
        return await self._core.services.event.get_event(event_id)

    async def create_event(self, auth_token: AuthToken, fields: EventFields) -> Event:
        """Create event (authenticated only)."""
        self._core.services.access.ensure_authenticated(auth_token)
        return await self._core.services.event.create_event(fields)

    async def update_event(self, auth_token: AuthToken, event_id: str, fields: EventFields) -> Event:
        """Replace event fields (authenticated only)."""
        self._core.services.access.ensure_authenticated(auth_token)
        return await self._core.services.event.update_event(event_id, fields)

    async def delete_event(self, auth_token: AuthToken, event_id: str) -> None:
        """Delete event (authenticated only)."""
        self._core.services.access.ensure_authenticated(auth_token)
        await self._core.services.event.delete_event(event_id)

    # === Metadata ===
    def get_version(self) -> dict[str, str]:
        return {
            "version": version("eventboard"),
            "git_commit_hash": self._core.config.git_commit_hash,
            "git_commit_date": self._core.config.git_commit_date,
            "build_time": self._core.config.build_time,
        }
