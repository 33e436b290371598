"""Repository primitives for tournament entities."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import Session

from liga.db.models.tournament import Tournament


def create_tournament(
    session: Session,
    *,
    name: str,
    description: str,
    published: bool,
    created_by: UUID,
) -> Tournament:
    """Create and return a tournament row."""
    tournament = Tournament(
        name=name,
        description=description,
        published=published,
        created_by=created_by,
    )
    session.add(tournament)
    session.flush()
    session.refresh(tournament)
    return tournament


def get_tournament(session: Session, tournament_id: UUID) -> Tournament | None:
    """Fetch a tournament by id."""
    return session.get(Tournament, tournament_id)


def list_tournaments(
    session: Session,
    *,
    published: bool | None = None,
    limit: int = 100,
    offset: int = 0,
) -> list[Tournament]:
    """List tournaments with optional published-state filtering."""
    stmt = select(Tournament)
    if published is not None:
        stmt = stmt.where(Tournament.published == published)
    stmt = stmt.order_by(Tournament.created_at.desc()).limit(limit).offset(offset)
    return list(session.scalars(stmt))


def update_tournament(
    session: Session,
    tournament: Tournament,
    *,
    name: str | None = None,
    description: str | None = None,
    published: bool | None = None,
) -> Tournament:
    """Update mutable tournament fields."""
    if name is not None:
        tournament.name = name
    if description is not None:
        tournament.description = description
    if published is not None:
        tournament.published = published
    session.flush()
    session.refresh(tournament)
    return tournament
