"""
Storage for admin-action records.

This is the receiving end of ``AuditRelay``: the ``/admin/action``
endpoint writes each relayed record to the ``admin_actions`` table
and administrators can list them back, newest first.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from ticketing_api.app.core.db import get_connection
from ticketing_api.app.schemas.admin_action import AdminAction, AdminActionCreate


logger = logging.getLogger(__name__)

_COLUMNS = "id, action, target_id, target_type, description, performed_by, created_at"


def _row_to_action(row) -> AdminAction:
    return AdminAction(
        id=row["id"],
        action=row["action"],
        target_id=row["target_id"],
        target_type=row["target_type"],
        description=row["description"],
        performed_by=row["performed_by"],
        created_at=row["created_at"],
    )


class AuditService:
    """Write and read admin-action records."""

    @classmethod
    async def log(cls, data: AdminActionCreate, performed_by: Optional[int]) -> AdminAction:
        """Insert a new admin-action record.

        Parameters
        ----------
        data : AdminActionCreate
            The action name plus the type, id and description of its target.
        performed_by : Optional[int]
            Id of the authenticated user that reported the action.
        """
        target_id = str(data.target_id) if data.target_id is not None else None
        conn = get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                """
                INSERT INTO admin_actions (action, target_id, target_type, description, performed_by)
                VALUES (?, ?, ?, ?, ?)
                """,
                (data.action, target_id, data.target_type, data.description, performed_by),
            )
            action_id = cursor.lastrowid
            conn.commit()
            row = cursor.execute(
                f"SELECT {_COLUMNS} FROM admin_actions WHERE id = ?", (action_id,)
            ).fetchone()
        finally:
            conn.close()
        logger.info(
            "User %s logged admin action '%s' on %s %s",
            performed_by,
            data.action,
            data.target_type,
            target_id,
        )
        return _row_to_action(row)

    @classmethod
    async def list_actions(cls) -> List[AdminAction]:
        conn = get_connection()
        try:
            rows = conn.execute(
                f"SELECT {_COLUMNS} FROM admin_actions ORDER BY id DESC"
            ).fetchall()
            return [_row_to_action(row) for row in rows]
        finally:
            conn.close()
