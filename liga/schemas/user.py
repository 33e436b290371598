"""Pydantic schemas for user API payloads."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel
from pydantic import ConfigDict


class UserCreate(BaseModel):
    """Payload to register a user.

    Fields are optional at the schema level so that missing values are
    reported by the field validators together with every other failure.
    """

    username: str | None = None
    email: str | None = None


class User(BaseModel):
    """User response payload."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    username: str
    email: str
    created_at: datetime
    updated_at: datetime


class UserListResponse(BaseModel):
    """List response envelope for users."""

    items: list[User]
