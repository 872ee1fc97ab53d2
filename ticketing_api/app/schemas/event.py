"""
Pydantic models for event data.

Field names are snake_case in Python and camelCase on the wire
(``ticketPrice``, ``maxTickets``).  Requests accept either spelling.
``Event`` is both the stored record and the response representation;
``EventCreate`` and ``EventUpdate`` describe request bodies.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class EventFields(BaseModel):
    """Client-editable event fields."""

    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = Field(None, examples=["Expo"])
    description: Optional[str] = Field(None, examples=["Annual trade expo"])
    date: Optional[datetime] = Field(None, examples=["2025-01-01T00:00:00"])
    location: Optional[str] = Field(None, examples=["Lagos"])
    ticket_price: Optional[float] = Field(None, alias="ticketPrice", examples=[50])
    max_tickets: Optional[int] = Field(None, alias="maxTickets", examples=[100])


class EventCreate(EventFields):
    """Body of ``POST /create-event``.

    Unknown keys, including ``organizer``, are ignored: the organizer is
    always the authenticated caller.
    """


class EventUpdate(EventFields):
    """Body of ``PUT /update-event/{id}``.

    Every field is optional.  A field replaces the stored value only
    when it is truthy, so ``0``, ``""``, ``false`` and ``null`` leave the
    event unchanged.  Falsy input is normalised to ``None`` before type
    validation so that ``{"date": ""}`` means "no change" rather than a
    parse error.
    """

    @field_validator(
        "name", "description", "date", "location", "ticket_price", "max_tickets", mode="before"
    )
    @classmethod
    def falsy_means_unchanged(cls, value):
        return value if value else None


class Event(EventFields):
    """A stored event."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: int
    organizer: int
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")


class EventResponse(BaseModel):
    message: str
    event: Event


class EventDetailResponse(BaseModel):
    event: Event


class EventsResponse(BaseModel):
    events: List[Event]


class MyEventsResponse(BaseModel):
    message: str
    events: List[Event]


class MessageResponse(BaseModel):
    message: str
