"""
User lookups backed by the ``users`` table.

Authentication reads users by id; the create-event notification reads
the organizer's name and email.  ``create_user`` exists for seeding
accounts from ``create_token.py`` and the test-suite.
"""

import logging
from typing import Optional

from ticketing_api.app.core.db import get_connection
from ticketing_api.app.schemas.user import User, UserCreate


logger = logging.getLogger(__name__)


def _row_to_user(row) -> User:
    return User(
        id=row["id"],
        name=row["name"],
        email=row["email"],
        role=row["role"],
        disabled=bool(row["disabled"]),
    )


class UserService:
    """Read and seed user records."""

    @classmethod
    def create_user(cls, data: UserCreate) -> User:
        conn = get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                "INSERT INTO users (name, email, role) VALUES (?, ?, ?)",
                (data.name, data.email, data.role),
            )
            user_id = cursor.lastrowid
            conn.commit()
            logger.info("Created user %s <%s> with role %s", user_id, data.email, data.role)
            return User(id=user_id, name=data.name, email=data.email, role=data.role)
        finally:
            conn.close()

    @classmethod
    def get_user(cls, user_id: int) -> Optional[User]:
        conn = get_connection()
        try:
            row = conn.execute(
                "SELECT id, name, email, role, disabled FROM users WHERE id = ?",
                (user_id,),
            ).fetchone()
            return _row_to_user(row) if row else None
        finally:
            conn.close()

    @classmethod
    def get_user_by_email(cls, email: str) -> Optional[User]:
        conn = get_connection()
        try:
            row = conn.execute(
                "SELECT id, name, email, role, disabled FROM users WHERE email = ?",
                (email,),
            ).fetchone()
            return _row_to_user(row) if row else None
        finally:
            conn.close()
