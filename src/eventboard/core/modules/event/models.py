from datetime import UTC, datetime

from pydantic import BaseModel, Field, field_validator

from eventboard.core.db import MongoModel
from eventboard.utils import now


class EventFields(BaseModel):
    """Editable event attributes, shared by create and update requests."""

    title: str = Field(..., min_length=1, description="Event title")
    description: str | None = Field(None, description="Free-form description")
    date: datetime = Field(..., description="Start time (UTC)")
    end_date: datetime | None = Field(None, description="End time (UTC)")
    location: str | None = Field(None, description="Where the event takes place")
    image_url: str | None = Field(None, description="Cover image URL")
    max_participants: int | None = Field(None, ge=1, description="Participant limit, unlimited when absent")

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("title must not be blank")
        return value

    @field_validator("date", "end_date")
    @classmethod
    def as_utc(cls, value: datetime | None) -> datetime | None:
        # Naive datetimes are taken to be UTC
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value.astimezone(UTC)


class Event(MongoModel, EventFields):
    """Event stored in the `events` collection."""

    created_at: datetime = Field(default_factory=now)
    updated_at: datetime = Field(default_factory=now)
