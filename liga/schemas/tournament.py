"""Pydantic schemas for tournament API payloads."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel
from pydantic import ConfigDict


class TournamentCreate(BaseModel):
    """Payload to create a tournament."""

    name: str | None = None
    description: str | None = None
    published: bool = False
    created_by: str | None = None


class TournamentUpdate(BaseModel):
    """Payload to update mutable tournament fields."""

    name: str | None = None
    description: str | None = None
    published: bool | None = None


class Tournament(BaseModel):
    """Tournament response payload."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    description: str
    published: bool
    created_by: UUID
    created_at: datetime
    updated_at: datetime


class TournamentListResponse(BaseModel):
    """List response envelope for tournaments."""

    items: list[Tournament]
