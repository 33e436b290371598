"""Error envelope schema shared across API handlers."""

from __future__ import annotations

from typing import Any
from typing import Literal

from pydantic import BaseModel


class ApiErrorResponse(BaseModel):
    """Wire body for every error response."""

    success: Literal[False] = False
    message: str
    error_code: str
    details: dict[str, Any] | None = None
    request_id: str | None = None

    def with_details(self, details: dict[str, Any]) -> ApiErrorResponse:
        return self.model_copy(update={"details": details})

    def with_request_id(self, request_id: str) -> ApiErrorResponse:
        return self.model_copy(update={"request_id": request_id})
