"""
Pydantic models for users.

Users are owned by the identity side of the platform; this service
only reads them to authenticate callers and address notifications.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


Role = Literal["user", "admin", "superadmin"]


class UserCreate(BaseModel):
    name: str = Field(..., examples=["Ada"])
    email: str = Field(..., examples=["ada@example.com"])
    role: Role = "user"


class User(BaseModel):
    """A user record as stored in the ``users`` table."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    role: Role
    disabled: bool = False
