from typing import Annotated

from fastapi import APIRouter, Query

from eventboard.core.modules.event.models import Event, EventFields
from eventboard.web.deps import AppDep, AuthTokenDep
from eventboard.web.guard import AuthGuardedRoute
from eventboard.web.openapi import ErrorResponse

router: APIRouter = APIRouter(tags=["events"])
# Writes reject unauthenticated requests before the body is parsed
protected_router: APIRouter = APIRouter(route_class=AuthGuardedRoute)


class EventRequest(EventFields):
    """Request to create or replace an event."""

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "title": "Spring meetup",
                    "description": "Talks and snacks",
                    "date": "2026-04-12T18:00:00Z",
                    "end_date": "2026-04-12T21:00:00Z",
                    "location": "Community hall",
                    "max_participants": 40,
                }
            ]
        }
    }


@router.get(
    "/events",
    summary="List events",
    description="List events ordered by date. Past events are included only when `all=true`.",
    operation_id="listEvents",
    responses={200: {"description": "List of events"}},
)
async def list_events(
    app: AppDep,
    all: Annotated[bool, Query(description="Include events that already started")] = False,  # noqa: A002
) -> list[Event]:
    return await app.get_events(include_past=all)


@router.get(
    "/events/{event_id}",
    summary="Get event",
    operation_id="getEvent",
    responses={
        200: {"description": "Event details"},
        404: {"model": ErrorResponse, "description": "Event not found"},
    },
)
async def get_event(event_id: str, app: AppDep) -> Event:
    return await app.get_event(event_id)


@protected_router.post(
    "/events",
    summary="Create event",
    operation_id="createEvent",
    status_code=201,
    responses={
        201: {"description": "Event created"},
        400: {"model": ErrorResponse, "description": "Invalid event data"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
    },
)
async def create_event(auth_token: AuthTokenDep, event_data: EventRequest, app: AppDep) -> Event:
    return await app.create_event(auth_token, event_data)


@protected_router.put(
    "/events/{event_id}",
    summary="Replace event",
    operation_id="updateEvent",
    responses={
        200: {"description": "Event updated"},
        400: {"model": ErrorResponse, "description": "Invalid event data"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
        404: {"model": ErrorResponse, "description": "Event not found"},
    },
)
async def update_event(auth_token: AuthTokenDep, event_id: str, event_data: EventRequest, app: AppDep) -> Event:
    return await app.update_event(auth_token, event_id, event_data)


@protected_router.delete(
    "/events/{event_id}",
    summary="Delete event",
    operation_id="deleteEvent",
    status_code=204,
    responses={
        204: {"description": "Event deleted"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
        404: {"model": ErrorResponse, "description": "Event not found"},
    },
)
async def delete_event(auth_token: AuthTokenDep, event_id: str, app: AppDep) -> None:
    await app.delete_event(auth_token, event_id)


router.include_router(protected_router)
