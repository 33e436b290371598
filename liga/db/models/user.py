"""SQLAlchemy model for league users."""

from __future__ import annotations

import uuid
from datetime import datetime
from datetime import timezone
from typing import TYPE_CHECKING

from sqlalchemy import DateTime
from sqlalchemy import PrimaryKeyConstraint
from sqlalchemy import String
from sqlalchemy import UniqueConstraint
from sqlalchemy import Uuid
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.orm import Mapped
from sqlalchemy.orm import mapped_column
from sqlalchemy.orm import relationship


class Base(DeclarativeBase):
    """Declarative base for league ORM models."""


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


if TYPE_CHECKING:
    from liga.db.models.participant import Participant
    from liga.db.models.tournament import Tournament


class User(Base):
    """Registered league member."""

    __tablename__ = "users"
    __table_args__ = (
        PrimaryKeyConstraint("id", name="pk_users"),
        UniqueConstraint("username", name="uq_users_username"),
        UniqueConstraint("email", name="uq_users_email"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    username: Mapped[str] = mapped_column(String(50), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        onupdate=utcnow,
    )

    tournaments: Mapped[list["Tournament"]] = relationship("Tournament", back_populates="creator")
    participations: Mapped[list["Participant"]] = relationship("Participant", back_populates="user")
