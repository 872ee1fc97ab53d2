"""
Admin-action endpoints for API v1.

``POST /admin/action`` receives the records ``AuditRelay`` sends when
an event is deleted; ``GET /admin/actions`` lists them.  Both are
restricted to ``admin`` and ``superadmin``.
"""

from fastapi import APIRouter, Depends, status

from ticketing_api.app.core.errors import server_errors
from ticketing_api.app.core.security import ADMIN_ROLES, require_roles
from ticketing_api.app.schemas.admin_action import (
    AdminActionCreate,
    AdminActionResponse,
    AdminActionsResponse,
)
from ticketing_api.app.services.audit_service import AuditService


router = APIRouter()


@router.post("/action", response_model=AdminActionResponse, status_code=status.HTTP_201_CREATED)
async def log_admin_action(
    data: AdminActionCreate,
    current_user: dict = Depends(require_roles(*ADMIN_ROLES)),
) -> AdminActionResponse:
    with server_errors():
        action = await AuditService.log(data, performed_by=current_user.get("user_id"))
    return AdminActionResponse(message="Admin action logged", admin_action=action)


@router.get("/actions", response_model=AdminActionsResponse)
async def list_admin_actions(
    current_user: dict = Depends(require_roles(*ADMIN_ROLES)),
) -> AdminActionsResponse:
    """List recorded admin actions, newest first."""
    with server_errors():
        actions = await AuditService.list_actions()
    return AdminActionsResponse(actions=actions)
