"""Repository primitives for tournament participants."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import Session

from liga.db.models.participant import Participant


def create_participant(session: Session, *, tournament_id: UUID, user_id: UUID) -> Participant:
    """Register a user in a tournament and return the row."""
    participant = Participant(tournament_id=tournament_id, user_id=user_id)
    session.add(participant)
    session.flush()
    session.refresh(participant)
    return participant


def list_participants(session: Session, tournament_id: UUID) -> list[Participant]:
    """List a tournament's participants in join order."""
    stmt = (
        select(Participant)
        .where(Participant.tournament_id == tournament_id)
        .order_by(Participant.joined_at.asc(), Participant.id.asc())
    )
    return list(session.scalars(stmt))
