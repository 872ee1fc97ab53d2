"""
Persistence for events.

``EventStore`` is the only code that issues SQL against the
``events`` table.  Every call opens its own connection and commits
before returning, so a read issued after a write sees it.  There is
no locking; concurrent saves of the same event are last-write-wins.
"""

from datetime import datetime
from typing import List, Optional

from ticketing_api.app.core.db import get_connection
from ticketing_api.app.schemas.event import Event


_COLUMNS = (
    "id, name, description, date, location, ticket_price, max_tickets, "
    "organizer, created_at, updated_at"
)


def _row_to_event(row) -> Event:
    return Event(
        id=row["id"],
        name=row["name"],
        description=row["description"],
        date=row["date"],
        location=row["location"],
        ticket_price=row["ticket_price"],
        max_tickets=row["max_tickets"],
        organizer=row["organizer"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def _iso(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value is not None else None


class EventStore:
    """CRUD access to stored events."""

    @classmethod
    def create(cls, record: dict) -> Event:
        """Insert an event and return it with its generated id.

        ``record`` holds the snake_case event fields plus ``organizer``.
        """
        conn = get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                """
                INSERT INTO events (name, description, date, location, ticket_price, max_tickets, organizer)
                VALUES (?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    record.get("name"),
                    record.get("description"),
                    _iso(record.get("date")),
                    record.get("location"),
                    record.get("ticket_price"),
                    record.get("max_tickets"),
                    record["organizer"],
                ),
            )
            event_id = cursor.lastrowid
            conn.commit()
            row = cursor.execute(
                f"SELECT {_COLUMNS} FROM events WHERE id = ?", (event_id,)
            ).fetchone()
            return _row_to_event(row)
        finally:
            conn.close()

    @classmethod
    def find_by_id(cls, event_id: int) -> Optional[Event]:
        conn = get_connection()
        try:
            row = conn.execute(
                f"SELECT {_COLUMNS} FROM events WHERE id = ?", (event_id,)
            ).fetchone()
            return _row_to_event(row) if row else None
        finally:
            conn.close()

    @classmethod
    def find_all(cls) -> List[Event]:
        conn = get_connection()
        try:
            rows = conn.execute(f"SELECT {_COLUMNS} FROM events ORDER BY id").fetchall()
            return [_row_to_event(row) for row in rows]
        finally:
            conn.close()

    @classmethod
    def find_by_organizer(cls, user_id: int) -> List[Event]:
        conn = get_connection()
        try:
            rows = conn.execute(
                f"SELECT {_COLUMNS} FROM events WHERE organizer = ? ORDER BY id",
                (user_id,),
            ).fetchall()
            return [_row_to_event(row) for row in rows]
        finally:
            conn.close()

    @classmethod
    def save(cls, event: Event) -> Event:
        """Write back the editable fields of ``event``.

        The organizer column is never updated.
        """
        conn = get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                """
                UPDATE events
                SET name = ?, description = ?, date = ?, location = ?,
                    ticket_price = ?, max_tickets = ?, updated_at = CURRENT_TIMESTAMP
                WHERE id = ?
                """,
                (
                    event.name,
                    event.description,
                    _iso(event.date),
                    event.location,
                    event.ticket_price,
                    event.max_tickets,
                    event.id,
                ),
            )
            conn.commit()
            row = cursor.execute(
                f"SELECT {_COLUMNS} FROM events WHERE id = ?", (event.id,)
            ).fetchone()
            return _row_to_event(row)
        finally:
            conn.close()

    @classmethod
    def delete_by_id(cls, event_id: int) -> None:
        conn = get_connection()
        try:
            conn.execute("DELETE FROM events WHERE id = ?", (event_id,))
            conn.commit()
        finally:
            conn.close()
