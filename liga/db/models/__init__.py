"""Model module imports for SQLAlchemy relationship registration."""

from liga.db.models.participant import Participant
from liga.db.models.tournament import Tournament
from liga.db.models.user import Base
from liga.db.models.user import User

__all__ = [
    "Base",
    "Participant",
    "Tournament",
    "User",
]
