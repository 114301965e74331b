from __future__ import annotations

from collections.abc import AsyncGenerator, Callable
from contextlib import asynccontextmanager
from datetime import datetime
from typing import TYPE_CHECKING, Any
from urllib.parse import urlparse

from pymongo import AsyncMongoClient
from pymongo.asynchronous.database import AsyncDatabase

from eventboard.config import Config
from eventboard.core.modules.session.store import SessionStore
from eventboard.utils import now

if TYPE_CHECKING:
    from eventboard.core.modules.access.service import AccessService
    from eventboard.core.modules.event.service import EventService
    from eventboard.core.modules.session.service import SessionService


class Service:
    """Base class for services with direct database access."""

    def __init__(self, database: AsyncDatabase[dict[str, Any]]) -> None:
        self.database = database
        self._core: Core | None = None

    async def on_start(self) -> None:
        """Initialize service on application startup."""

    async def on_stop(self) -> None:
        """Cleanup service on application shutdown."""

    @property
    def core(self) -> Core:
        """Get the core application context."""
        if self._core is None:
            raise RuntimeError("Core not set for service")
        return self._core

    def set_core(self, core: Core) -> None:
        """Set the core application context."""
        self._core = core


class Services:
    """Service registry, constructed once per Core."""

    session: SessionService
    access: AccessService
    event: EventService

    def __init__(
        self,
        database: AsyncDatabase[dict[str, Any]],
        session_store: SessionStore,
        clock: Callable[[], datetime],
    ) -> None:
        from eventboard.core.modules.access.service import AccessService  # noqa: PLC0415
        from eventboard.core.modules.event.service import EventService  # noqa: PLC0415
        from eventboard.core.modules.session.service import SessionService  # noqa: PLC0415

        self.session = SessionService(database, session_store, clock)
        self.access = AccessService(database)
        self.event = EventService(database)
        # Start order; stopped in reverse
        self._services: list[Service] = [self.session, self.access, self.event]

    def set_core(self, core: Core) -> None:
        """Set core reference for all services."""
        for service in self._services:
            service.set_core(core)

    async def start_all(self) -> None:
        for service in self._services:
            await service.on_start()

    async def stop_all(self) -> None:
        for service in reversed(self._services):
            await service.on_stop()


class Core:
    """Container providing config, database, the session store and all service instances."""

    config: Config
    mongo_client: AsyncMongoClient[dict[str, Any]]
    database: AsyncDatabase[dict[str, Any]]
    session_store: SessionStore
    services: Services

    def __init__(self, config: Config, clock: Callable[[], datetime] = now) -> None:
        """Initialize core with config, MongoDB, a fresh session store and all services."""
        self.config = config
        self.mongo_client = AsyncMongoClient(config.database_url, uuidRepresentation="standard", tz_aware=True)
        self.database = self.mongo_client.get_database(urlparse(config.database_url).path[1:])
        self.session_store = SessionStore()
        self.services = Services(self.database, self.session_store, clock)
        self.services.set_core(self)

    @asynccontextmanager
    async def lifespan(self) -> AsyncGenerator[None]:
        """Manage application lifecycle - startup and shutdown."""
        await self.on_start()
        try:
            yield
        finally:
            await self.on_stop()

    async def on_start(self) -> None:
        await self.services.start_all()

    async def on_stop(self) -> None:
        """Stop services and close MongoDB connection on shutdown."""
        await self.services.stop_all()
        await self.mongo_client.aclose()
