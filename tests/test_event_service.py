"""Unit tests for EventService and the falsy field merge.

Run with: pytest tests/test_event_service.py -v
"""

import asyncio
from datetime import datetime

import pytest

from ticketing_api.app.core.errors import Forbidden, NotFound
from ticketing_api.app.schemas.event import Event, EventCreate, EventUpdate
from ticketing_api.app.services.event_service import EventService, merge_event_fields
from ticketing_api.app.services.event_store import EventStore


def caller(user, token="tok"):
    return {"user_id": user.id, "role": user.role, "token": token}


@pytest.fixture
def stored_event():
    return Event(
        id=1,
        organizer=7,
        name="Expo",
        description="Trade expo",
        date=datetime(2025, 1, 1),
        location="Lagos",
        ticket_price=50.0,
        max_tickets=100,
    )


class TestMergeEventFields:
    def test_truthy_values_overwrite(self, stored_event):
        merged = merge_event_fields(stored_event, EventUpdate(name="Expo II", ticketPrice=60))
        assert merged.name == "Expo II"
        assert merged.ticket_price == 60
        assert merged.location == "Lagos"

    def test_falsy_values_are_ignored(self, stored_event):
        merged = merge_event_fields(
            stored_event,
            EventUpdate(name="", description="", ticketPrice=0, maxTickets=0, location=None),
        )
        assert merged == stored_event

    def test_empty_or_false_on_typed_fields_is_ignored(self, stored_event):
        updates = EventUpdate.model_validate(
            {"date": "", "ticketPrice": "", "maxTickets": False, "name": False}
        )

        assert updates.date is None
        assert merge_event_fields(stored_event, updates) == stored_event

    def test_accepts_snake_case_names(self, stored_event):
        merged = merge_event_fields(stored_event, EventUpdate(max_tickets=250))
        assert merged.max_tickets == 250

    def test_never_touches_organizer_or_id(self, stored_event):
        merged = merge_event_fields(stored_event, EventUpdate.model_validate({"organizer": 99, "id": 5}))
        assert merged.organizer == 7
        assert merged.id == 1


class TestEventService:
    def test_create_sets_organizer_from_caller(self, make_user, outbox):
        user, _ = make_user()

        event = asyncio.run(
            EventService.create_event(EventCreate(name="Expo", ticketPrice=10), caller(user))
        )

        assert event.organizer == user.id
        assert EventStore.find_by_id(event.id) == event
        assert outbox[0]["to"] == user.email

    def test_list_all_requires_admin_role(self, make_user):
        user, _ = make_user()
        with pytest.raises(Forbidden):
            asyncio.run(EventService.list_all_events(caller(user)))

    def test_list_all_empty_raises_not_found(self, make_user):
        admin, _ = make_user("superadmin")
        with pytest.raises(NotFound):
            asyncio.run(EventService.list_all_events(caller(admin)))

    def test_update_by_superadmin_non_owner_is_forbidden(self, make_user, outbox):
        owner, _ = make_user()
        superadmin, _ = make_user("superadmin")
        event = asyncio.run(EventService.create_event(EventCreate(name="Expo"), caller(owner)))

        with pytest.raises(Forbidden):
            asyncio.run(EventService.update_event(event.id, EventUpdate(name="X"), caller(superadmin)))

    def test_delete_relays_with_callers_token(self, make_user, outbox, relayed):
        owner, _ = make_user()
        admin, _ = make_user("admin")
        event = asyncio.run(EventService.create_event(EventCreate(name="Expo"), caller(owner)))

        asyncio.run(EventService.delete_event(event.id, caller(admin, token="admin-token")))

        assert EventStore.find_by_id(event.id) is None
        assert relayed == [
            (
                {
                    "action": "Deleted Event",
                    "targetId": event.id,
                    "targetType": "event",
                    "description": 'Event "Expo" was deleted by admin.',
                },
                "admin-token",
            )
        ]

    def test_delete_by_user_is_forbidden_before_lookup(self, make_user, relayed):
        user, _ = make_user()
        with pytest.raises(Forbidden):
            asyncio.run(EventService.delete_event(1, caller(user)))
        assert relayed == []
