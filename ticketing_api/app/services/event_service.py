"""
Business logic for the event lifecycle.

``EventService`` applies the access rules for each operation and then
calls into ``EventStore``, ``NotificationService`` and ``AuditRelay``.
Side effects are not transactional: an event created before its
notification fails, or deleted before its audit record is relayed,
stays created or deleted while the request reports a server error.
"""

import logging
from typing import List

from ticketing_api.app.core.errors import Forbidden, NotFound
from ticketing_api.app.core.security import ADMIN_ROLES, ROLE_ADMIN, has_role
from ticketing_api.app.schemas.event import Event, EventCreate, EventUpdate
from ticketing_api.app.services.audit_relay import AuditRelay
from ticketing_api.app.services.email_templates import event_creation_email_template
from ticketing_api.app.services.event_store import EventStore
from ticketing_api.app.services.notification_service import NotificationService
from ticketing_api.app.services.user_service import UserService


logger = logging.getLogger(__name__)

EVENT_LIVE_SUBJECT = "Your Event is Live!"

# Fields copied by ``update_event`` when the incoming value is truthy.
MERGE_FIELDS = ("name", "description", "date", "location", "ticket_price", "max_tickets")


def merge_event_fields(event: Event, updates: EventUpdate) -> Event:
    """Return ``event`` with every truthy field of ``updates`` applied.

    Falsy values (``None``, ``0``, ``""``) keep the stored value, so a
    numeric field cannot be reset to zero through an update.
    """
    changes = {}
    for field in MERGE_FIELDS:
        value = getattr(updates, field)
        if value:
            changes[field] = value
    return event.model_copy(update=changes)


class EventService:
    """Create, read, update, list and delete events on behalf of a caller.

    ``current_user`` is the dict produced by ``get_current_user``; the
    methods read its ``user_id``, ``role`` and ``token`` keys.
    """

    @classmethod
    async def create_event(cls, data: EventCreate, current_user: dict) -> Event:
        """Store a new event organized by the caller and notify the caller.

        The organizer's own address receives the "Your Event is Live!"
        email.  A lookup or delivery failure propagates after the event
        has been stored.
        """
        organizer_id = current_user["user_id"]
        logger.info("User %s is creating event '%s'", organizer_id, data.name)
        record = data.model_dump(include=set(MERGE_FIELDS))
        record["organizer"] = organizer_id
        event = EventStore.create(record)

        user = UserService.get_user(organizer_id)
        if user is None:
            raise LookupError(f"User {organizer_id} not found")
        html_body = event_creation_email_template(user.name, event.name)
        await NotificationService.send(user.email, EVENT_LIVE_SUBJECT, html_body)
        return event

    @classmethod
    async def list_all_events(cls, current_user: dict) -> List[Event]:
        if not has_role(current_user.get("role"), ADMIN_ROLES):
            raise Forbidden("Access denied. Admin only.")
        events = EventStore.find_all()
        if not events:
            raise NotFound("No events found.")
        return events

    @classmethod
    async def get_event(cls, event_id: int, current_user: dict) -> Event:
        """Return an event by id.  Any authenticated caller may read any event."""
        event = EventStore.find_by_id(event_id)
        if event is None:
            raise NotFound("Event not found")
        return event

    @classmethod
    async def list_my_events(cls, current_user: dict) -> List[Event]:
        events = EventStore.find_by_organizer(current_user["user_id"])
        if not events:
            raise NotFound("No events found for this user.")
        return events

    @classmethod
    async def update_event(cls, event_id: int, updates: EventUpdate, current_user: dict) -> Event:
        """Apply a partial update as the organizer or an ``admin``.

        ``superadmin`` is deliberately not in the allowed set here, unlike
        for deletion.
        """
        event = EventStore.find_by_id(event_id)
        if event is None:
            raise NotFound("Event not found")
        if event.organizer != current_user.get("user_id") and current_user.get("role") != ROLE_ADMIN:
            logger.info(
                "User %s denied update of event %s organized by %s",
                current_user.get("user_id"),
                event_id,
                event.organizer,
            )
            raise Forbidden("Access denied. Not the event organizer.")
        updated = EventStore.save(merge_event_fields(event, updates))
        logger.info("User %s updated event %s", current_user.get("user_id"), event_id)
        return updated

    @classmethod
    async def delete_event(cls, event_id: int, current_user: dict) -> None:
        """Delete an event and relay a "Deleted Event" record to the audit service.

        The caller's bearer token authenticates the relay call.
        """
        if not has_role(current_user.get("role"), ADMIN_ROLES):
            raise Forbidden("Access denied. Admin only.")
        event = EventStore.find_by_id(event_id)
        if event is None:
            raise NotFound("Event not found")
        EventStore.delete_by_id(event.id)
        logger.info("User %s deleted event %s", current_user.get("user_id"), event.id)

        admin_action = {
            "action": "Deleted Event",
            "targetId": event.id,
            "targetType": "event",
            "description": f'Event "{event.name}" was deleted by admin.',
        }
        await AuditRelay.relay(admin_action, current_user["token"])
