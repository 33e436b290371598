"""Service helpers for tournament participation."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from liga.core import validators
from liga.core.errors import ConflictError
from liga.core.errors import TournamentError
from liga.core.errors import UserError
from liga.core.logging import tournament_event
from liga.core.validation import validate
from liga.db.repository.participants import create_participant
from liga.db.repository.participants import list_participants
from liga.db.repository.users import get_user
from liga.schemas.participant import ParticipantCreate
from liga.services.tournaments import get_tournament_service
from liga.services.tournaments import parse_uuid


def join_tournament_service(session: Session, tournament_id: UUID, payload: ParticipantCreate):
    """Register a user in a published tournament."""
    tournament = get_tournament_service(session, tournament_id)
    validate(
        lambda: validators.required(payload.user_id, "user_id"),
        lambda: validators.uuid_format((payload.user_id or "").strip(), "user_id"),
    )
    user_id = parse_uuid(payload.user_id, "user_id")

    if get_user(session, user_id) is None:
        raise UserError(message="User does not exist", user_id=str(user_id))
    if not tournament.published:
        raise TournamentError(
            message="Tournament is not open for registration",
            tournament_id=str(tournament.id),
        )

    try:
        participant = create_participant(session, tournament_id=tournament.id, user_id=user_id)
        session.commit()
    except IntegrityError as exc:
        session.rollback()
        raise ConflictError(message="User is already registered for this tournament") from exc

    tournament_event("participant_joined", str(tournament.id), str(user_id))
    return participant


def list_participants_service(session: Session, tournament_id: UUID):
    """List participants of an existing tournament."""
    tournament = get_tournament_service(session, tournament_id)
    return list_participants(session, tournament.id)
