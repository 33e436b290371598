"""Service helpers for user API operations."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from liga.core import validators
from liga.core.errors import ConflictError
from liga.core.errors import NotFoundError
from liga.core.validation import validate
from liga.db.repository.users import create_user
from liga.db.repository.users import get_user
from liga.db.repository.users import list_users
from liga.schemas.user import UserCreate


def validate_user_payload(payload: UserCreate) -> None:
    """Check every user field and raise all failures together."""
    validate(
        lambda: validators.required(payload.username, "username"),
        lambda: validators.username((payload.username or "").strip(), "username"),
        lambda: validators.required(payload.email, "email"),
        lambda: validators.email((payload.email or "").strip(), "email"),
    )


def create_user_service(session: Session, payload: UserCreate):
    """Create and persist a new user."""
    validate_user_payload(payload)
    try:
        user = create_user(
            session,
            username=payload.username.strip(),
            email=payload.email.strip(),
        )
        session.commit()
    except IntegrityError as exc:
        session.rollback()
        raise ConflictError(message="A user with this username or email already exists") from exc
    return user


def list_users_service(session: Session):
    """List registered users."""
    return list_users(session)


def get_user_service(session: Session, user_id: UUID):
    """Fetch a user or raise not found."""
    user = get_user(session, user_id)
    if user is None:
        raise NotFoundError(resource="user", id=str(user_id))
    return user
