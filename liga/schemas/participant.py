"""Pydantic schemas for participant API payloads."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel
from pydantic import ConfigDict


class ParticipantCreate(BaseModel):
    """Payload to join a tournament."""

    user_id: str | None = None


class Participant(BaseModel):
    """Participant response payload."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    tournament_id: UUID
    user_id: UUID
    joined_at: datetime


class ParticipantListResponse(BaseModel):
    """List response envelope for participants."""

    items: list[Participant]
