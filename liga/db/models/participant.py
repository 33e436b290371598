"""SQLAlchemy model for tournament participants."""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime
from sqlalchemy import ForeignKey
from sqlalchemy import PrimaryKeyConstraint
from sqlalchemy import UniqueConstraint
from sqlalchemy import Uuid
from sqlalchemy.orm import Mapped
from sqlalchemy.orm import mapped_column
from sqlalchemy.orm import relationship

from liga.db.models.user import Base
from liga.db.models.user import utcnow

if TYPE_CHECKING:
    from liga.db.models.tournament import Tournament
    from liga.db.models.user import User


class Participant(Base):
    """A user's registration in a tournament."""

    __tablename__ = "participants"
    __table_args__ = (
        PrimaryKeyConstraint("id", name="pk_participants"),
        UniqueConstraint("tournament_id", "user_id", name="uq_participants_tournament_id_user_id"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    tournament_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("tournaments.id", ondelete="CASCADE", name="fk_participants_tournament_id_tournaments"),
        nullable=False,
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE", name="fk_participants_user_id_users"),
        nullable=False,
    )
    joined_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utcnow)

    tournament: Mapped["Tournament"] = relationship("Tournament", back_populates="participants")
    user: Mapped["User"] = relationship("User", back_populates="participations")
