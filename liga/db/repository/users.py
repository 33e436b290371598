"""Repository primitives for user entities."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import Session

from liga.db.models.user import User


def create_user(session: Session, *, username: str, email: str) -> User:
    """Create and return a user row."""
    user = User(username=username, email=email)
    session.add(user)
    session.flush()
    session.refresh(user)
    return user


def get_user(session: Session, user_id: UUID) -> User | None:
    """Fetch a user by id."""
    return session.get(User, user_id)


def list_users(session: Session, *, limit: int = 100, offset: int = 0) -> list[User]:
    """List users, newest first."""
    stmt = select(User).order_by(User.created_at.desc()).limit(limit).offset(offset)
    return list(session.scalars(stmt))
