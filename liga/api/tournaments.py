"""Tournament API routes."""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter
from fastapi import Depends
from sqlalchemy.orm import Session

from liga.core.config import API_PREFIX
from liga.db.base import get_db_session
from liga.schemas.tournament import Tournament
from liga.schemas.tournament import TournamentCreate
from liga.schemas.tournament import TournamentListResponse
from liga.schemas.tournament import TournamentUpdate
from liga.services.tournaments import create_tournament_service
from liga.services.tournaments import get_tournament_service
from liga.services.tournaments import list_tournaments_service
from liga.services.tournaments import update_tournament_service

router = APIRouter(prefix=API_PREFIX, tags=["tournaments"])


@router.post("/tournaments", response_model=Tournament, status_code=201)
def create_tournament_endpoint(
    payload: TournamentCreate,
    session: Session = Depends(get_db_session),
) -> Tournament:
    """Create a tournament."""
    return create_tournament_service(session, payload)


@router.get("/tournaments", response_model=TournamentListResponse)
def list_tournaments_endpoint(
    published: bool | None = None,
    session: Session = Depends(get_db_session),
) -> TournamentListResponse:
    """List tournaments with optional published filter."""
    return TournamentListResponse(items=list_tournaments_service(session, published=published))


@router.get("/tournaments/{tournament_id}", response_model=Tournament)
def get_tournament_endpoint(
    tournament_id: UUID,
    session: Session = Depends(get_db_session),
) -> Tournament:
    """Get a single tournament by id."""
    return get_tournament_service(session, tournament_id)


@router.patch("/tournaments/{tournament_id}", response_model=Tournament)
def update_tournament_endpoint(
    tournament_id: UUID,
    payload: TournamentUpdate,
    session: Session = Depends(get_db_session),
) -> Tournament:
    """Update a tournament."""
    return update_tournament_service(session, tournament_id, payload)
