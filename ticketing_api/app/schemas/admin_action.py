"""
Pydantic models for admin-action records.

The same shape is sent by ``AuditRelay`` and accepted by the
``/admin/action`` endpoint.
"""

from datetime import datetime
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class AdminActionCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    action: str = Field(..., examples=["Deleted Event"])
    target_id: Optional[Union[int, str]] = Field(None, alias="targetId", examples=["42"])
    target_type: Optional[str] = Field(None, alias="targetType", examples=["event"])
    description: Optional[str] = Field(None, examples=['Event "Expo" was deleted by admin.'])


class AdminAction(AdminActionCreate):
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: int
    performed_by: Optional[int] = Field(None, alias="performedBy")
    created_at: Optional[datetime] = Field(None, alias="createdAt")


class AdminActionResponse(BaseModel):
    message: str
    admin_action: AdminAction = Field(..., alias="adminAction")

    model_config = ConfigDict(populate_by_name=True)


class AdminActionsResponse(BaseModel):
    actions: List[AdminAction]
