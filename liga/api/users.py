"""User API routes."""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter
from fastapi import Depends
from sqlalchemy.orm import Session

from liga.core.config import API_PREFIX
from liga.db.base import get_db_session
from liga.schemas.user import User
from liga.schemas.user import UserCreate
from liga.schemas.user import UserListResponse
from liga.services.users import create_user_service
from liga.services.users import get_user_service
from liga.services.users import list_users_service

router = APIRouter(prefix=API_PREFIX, tags=["users"])


@router.post("/users", response_model=User, status_code=201)
def create_user_endpoint(
    payload: UserCreate,
    session: Session = Depends(get_db_session),
) -> User:
    """Register a user."""
    return create_user_service(session, payload)


@router.get("/users", response_model=UserListResponse)
def list_users_endpoint(session: Session = Depends(get_db_session)) -> UserListResponse:
    """List users."""
    return UserListResponse(items=list_users_service(session))


@router.get("/users/{user_id}", response_model=User)
def get_user_endpoint(
    user_id: UUID,
    session: Session = Depends(get_db_session),
) -> User:
    """Get a single user by id."""
    return get_user_service(session, user_id)
