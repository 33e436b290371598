"""Participant API routes."""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter
from fastapi import Depends
from sqlalchemy.orm import Session

from liga.core.config import API_PREFIX
from liga.db.base import get_db_session
from liga.schemas.participant import Participant
from liga.schemas.participant import ParticipantCreate
from liga.schemas.participant import ParticipantListResponse
from liga.services.participants import join_tournament_service
from liga.services.participants import list_participants_service

router = APIRouter(prefix=API_PREFIX, tags=["participants"])


@router.post("/tournaments/{tournament_id}/participants", response_model=Participant, status_code=201)
def join_tournament_endpoint(
    tournament_id: UUID,
    payload: ParticipantCreate,
    session: Session = Depends(get_db_session),
) -> Participant:
    """Register a user in a tournament."""
    return join_tournament_service(session, tournament_id, payload)


@router.get("/tournaments/{tournament_id}/participants", response_model=ParticipantListResponse)
def list_participants_endpoint(
    tournament_id: UUID,
    session: Session = Depends(get_db_session),
) -> ParticipantListResponse:
    """List a tournament's participants."""
    return ParticipantListResponse(items=list_participants_service(session, tournament_id))
