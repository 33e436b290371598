"""Health check response schema."""

from __future__ import annotations

from pydantic import BaseModel


class HealthStatus(BaseModel):
    name: str
    status: str
    version: str
    database: str | None = None
