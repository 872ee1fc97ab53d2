"""
Event endpoints for API v1.

Every route requires a bearer token.  Listing all events and deleting
are restricted to ``admin`` and ``superadmin``; updates are allowed to
the event's organizer or an ``admin``.  Unexpected failures are
reported as ``500 {"message": "Server error", "error": ...}``.
"""

from fastapi import APIRouter, Depends, status

from ticketing_api.app.core.errors import server_errors
from ticketing_api.app.core.security import ADMIN_ROLES, get_current_user, require_roles
from ticketing_api.app.schemas.event import (
    EventCreate,
    EventDetailResponse,
    EventResponse,
    EventsResponse,
    EventUpdate,
    MessageResponse,
    MyEventsResponse,
)
from ticketing_api.app.services.event_service import EventService


router = APIRouter()


@router.post("/create-event", response_model=EventResponse, status_code=status.HTTP_201_CREATED)
async def create_event(
    event: EventCreate,
    current_user: dict = Depends(get_current_user),
) -> EventResponse:
    """Create an event organized by the caller.

    The organizer is taken from the token, never from the body.  The
    organizer is emailed once the event is stored.
    """
    with server_errors():
        created = await EventService.create_event(event, current_user)
    return EventResponse(message="Event created successfully", event=created)


@router.get("/all-events", response_model=EventsResponse)
async def list_all_events(
    current_user: dict = Depends(require_roles(*ADMIN_ROLES)),
) -> EventsResponse:
    """List every event (admin only).  An empty store answers 404."""
    with server_errors():
        events = await EventService.list_all_events(current_user)
    return EventsResponse(events=events)


@router.get("/event/{event_id}", response_model=EventDetailResponse)
async def get_event(
    event_id: int,
    current_user: dict = Depends(get_current_user),
) -> EventDetailResponse:
    with server_errors():
        event = await EventService.get_event(event_id, current_user)
    return EventDetailResponse(event=event)


@router.get("/my-events", response_model=MyEventsResponse)
async def list_my_events(
    current_user: dict = Depends(get_current_user),
) -> MyEventsResponse:
    """List the events organized by the caller.  None answers 404."""
    with server_errors():
        events = await EventService.list_my_events(current_user)
    return MyEventsResponse(message="Events retrieved successfully", events=events)


@router.put("/update-event/{event_id}", response_model=EventResponse)
async def update_event(
    event_id: int,
    updates: EventUpdate,
    current_user: dict = Depends(get_current_user),
) -> EventResponse:
    """Update an event.

    Only truthy fields replace stored values; omitted, empty or zero
    fields are left as they are.
    """
    with server_errors():
        event = await EventService.update_event(event_id, updates, current_user)
    return EventResponse(message="Event updated successfully", event=event)


@router.delete("/event/{event_id}", response_model=MessageResponse)
async def delete_event(
    event_id: int,
    current_user: dict = Depends(require_roles(*ADMIN_ROLES)),
) -> MessageResponse:
    """Delete an event (admin only) and report it to the audit service."""
    with server_errors():
        await EventService.delete_event(event_id, current_user)
    return MessageResponse(message="Event deleted successfully")
