"""Health check route."""

from __future__ import annotations

import logging

from fastapi import APIRouter
from fastapi import Depends
from sqlalchemy.orm import Session

from liga.core.config import API_PREFIX
from liga.core.config import APP_NAME
from liga.core.config import APP_VERSION
from liga.db.base import check_database
from liga.db.base import get_db_session
from liga.schemas.health import HealthStatus

logger = logging.getLogger(__name__)

router = APIRouter(prefix=API_PREFIX, tags=["health"])


@router.get("/health", response_model=HealthStatus)
def health_endpoint(session: Session = Depends(get_db_session)) -> HealthStatus:
    """Report service status; a failed database query never fails the health check."""
    if check_database(session):
        database = "Connected"
    else:
        logger.warning("Health check database query failed")
        database = "Disconnected"
    return HealthStatus(name=APP_NAME, status="OK", version=f"v{APP_VERSION}", database=database)
