from typing import Any
from uuid import UUID

import structlog
from pymongo.asynchronous.database import AsyncDatabase

from eventboard import utils
from eventboard.core.core import Service
from eventboard.core.modules.event.models import Event, EventFields
from eventboard.errors import NotFoundError

logger = structlog.get_logger(__name__)


def parse_event_id(event_id: str) -> UUID:
    """Parse an event id; anything that is not a UUID cannot name an event."""
    try:
        return UUID(event_id)
    except ValueError:
        raise NotFoundError(f"Event '{event_id}' not found") from None


class EventService(Service):
    """Service for event persistence."""

    def __init__(self, database: AsyncDatabase[dict[str, Any]]) -> None:
        super().__init__(database)
        self._collection = database.get_collection("events")

    async def on_start(self) -> None:
        await self._collection.create_index([("date", 1)])

    async def list_events(self, include_past: bool = False) -> list[Event]:
        """List events ordered by date, only upcoming ones unless include_past is set."""
        query: dict[str, Any] = {} if include_past else {"date": {"$gte": utils.now()}}
        return await Event.list_cursor(self._collection.find(query).sort("date", 1))

    async def get_event(self, event_id: str) -> Event:
        event = Event.from_mongo(await self._collection.find_one({"_id": parse_event_id(event_id)}))
        if event is None:
            raise NotFoundError(f"Event '{event_id}' not found")
        return event

    async def create_event(self, fields: EventFields) -> Event:
        event = Event(**fields.model_dump())
        await self._collection.insert_one(event.to_mongo())
        logger.info("event_created", event_id=str(event.id))
        return event

    async def update_event(self, event_id: str, fields: EventFields) -> Event:
        """Replace all editable fields of an event."""
        update = {**fields.model_dump(), "updated_at": utils.now()}
        result = await self._collection.update_one({"_id": parse_event_id(event_id)}, {"$set": update})
        if result.matched_count == 0:
            raise NotFoundError(f"Event '{event_id}' not found")
        logger.info("event_updated", event_id=event_id)
        return await self.get_event(event_id)

    async def delete_event(self, event_id: str) -> None:
        result = await self._collection.delete_one({"_id": parse_event_id(event_id)})
        if result.deleted_count == 0:
            raise NotFoundError(f"Event '{event_id}' not found")
        logger.info("event_deleted", event_id=event_id)
