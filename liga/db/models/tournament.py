"""SQLAlchemy model for tournaments."""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import Boolean
from sqlalchemy import DateTime
from sqlalchemy import ForeignKey
from sqlalchemy import PrimaryKeyConstraint
from sqlalchemy import String
from sqlalchemy import Text
from sqlalchemy import Uuid
from sqlalchemy.orm import Mapped
from sqlalchemy.orm import mapped_column
from sqlalchemy.orm import relationship

from liga.db.models.user import Base
from liga.db.models.user import utcnow

if TYPE_CHECKING:
    from liga.db.models.participant import Participant
    from liga.db.models.user import User


class Tournament(Base):
    """Tournament organised by a user; open for registration once published."""

    __tablename__ = "tournaments"
    __table_args__ = (PrimaryKeyConstraint("id", name="pk_tournaments"),)

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    published: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_by: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE", name="fk_tournaments_created_by_users"),
        nullable=False,
    )
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        onupdate=utcnow,
    )

    creator: Mapped["User"] = relationship("User", back_populates="tournaments")
    participants: Mapped[list["Participant"]] = relationship("Participant", back_populates="tournament")
