"""Service helpers for tournament API operations."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy.orm import Session

from liga.core import validators
from liga.core.errors import NotFoundError
from liga.core.errors import UserError
from liga.core.errors import field_error
from liga.core.logging import tournament_event
from liga.core.validation import ValidationBuilder
from liga.core.validation import validate
from liga.db.repository.tournaments import create_tournament
from liga.db.repository.tournaments import get_tournament
from liga.db.repository.tournaments import list_tournaments
from liga.db.repository.tournaments import update_tournament
from liga.db.repository.users import get_user
from liga.schemas.tournament import TournamentCreate
from liga.schemas.tournament import TournamentUpdate

DESCRIPTION_MAX_LENGTH = 2000


def parse_uuid(value: str, field: str) -> UUID:
    """Parse an already format-checked identifier, reporting bad hex as a field error."""
    with field_error(field):
        return UUID(value.strip())


def validate_tournament_create(payload: TournamentCreate) -> None:
    validate(
        lambda: validators.required(payload.name, "name"),
        lambda: validators.tournament_name((payload.name or "").strip(), "name"),
        lambda: validators.length(payload.description or "", 0, DESCRIPTION_MAX_LENGTH, "description"),
        lambda: validators.required(payload.created_by, "created_by"),
        lambda: validators.uuid_format((payload.created_by or "").strip(), "created_by"),
    )


def validate_tournament_update(payload: TournamentUpdate) -> None:
    builder = ValidationBuilder()
    if payload.name is not None:
        builder.check(lambda: validators.tournament_name(payload.name.strip(), "name"))
    if payload.description is not None:
        builder.check(lambda: validators.length(payload.description, 0, DESCRIPTION_MAX_LENGTH, "description"))
    builder.build_unit()


def create_tournament_service(session: Session, payload: TournamentCreate):
    """Create and persist a tournament for an existing user."""
    validate_tournament_create(payload)
    creator_id = parse_uuid(payload.created_by, "created_by")
    if get_user(session, creator_id) is None:
        raise UserError(message="Tournament creator does not exist", user_id=str(creator_id))

    tournament = create_tournament(
        session,
        name=payload.name.strip(),
        description=payload.description or "",
        published=payload.published,
        created_by=creator_id,
    )
    session.commit()
    tournament_event("created", str(tournament.id), str(creator_id))
    return tournament


def list_tournaments_service(session: Session, *, published: bool | None = None):
    """List tournaments with optional published-state filtering."""
    return list_tournaments(session, published=published)


def get_tournament_service(session: Session, tournament_id: UUID):
    """Fetch a tournament or raise not found."""
    tournament = get_tournament(session, tournament_id)
    if tournament is None:
        raise NotFoundError(resource="tournament", id=str(tournament_id))
    return tournament


def update_tournament_service(session: Session, tournament_id: UUID, payload: TournamentUpdate):
    """Update mutable fields for an existing tournament."""
    tournament = get_tournament_service(session, tournament_id)
    validate_tournament_update(payload)
    was_published = tournament.published
    tournament = update_tournament(
        session,
        tournament,
        name=payload.name.strip() if payload.name is not None else None,
        description=payload.description,
        published=payload.published,
    )
    session.commit()
    if tournament.published and not was_published:
        tournament_event("published", str(tournament.id))
    return tournament
