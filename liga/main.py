"""FastAPI application entrypoint for the league backend."""

from __future__ import annotations

import time
from collections.abc import AsyncIterator
from collections.abc import Awaitable
from collections.abc import Callable
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi import Request
from fastapi import Response
from sqlalchemy.exc import SQLAlchemyError
import uvicorn

from liga.api.health import router as health_router
from liga.api.participants import router as participants_router
from liga.api.tournaments import router as tournaments_router
from liga.api.users import router as users_router
from liga.core import logging as app_logging
from liga.core.config import APP_NAME
from liga.core.config import APP_VERSION
from liga.core.config import MAX_REQUEST_SIZE
from liga.core.config import get_settings
from liga.core.errors import BadRequestError
from liga.core.handlers import register_error_handlers
from liga.core.handlers import render_api_error
from liga.db.base import init_db


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    settings = get_settings()
    app_logging.configure_logging(settings.log_level)
    app_logging.startup_info(settings.port)

    # Fail fast: the service is useless without its schema.
    app_logging.schema_init()
    try:
        init_db()
    except SQLAlchemyError as exc:
        app_logging.database_error(str(exc))
        raise
    app_logging.schema_success()
    app_logging.database_info(settings.safe_for_logging()["database_url"])
    app_logging.server_ready(settings.port)

    yield

    app_logging.shutdown()


app = FastAPI(title=APP_NAME, version=APP_VERSION, lifespan=lifespan)
register_error_handlers(app)
app.include_router(health_router)
app.include_router(users_router)
app.include_router(tournaments_router)
app.include_router(participants_router)


@app.middleware("http")
async def log_requests(request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
    """Reject oversized bodies and record request timing."""
    app_logging.request_debug(request.method, request.url.path, request.headers.get("user-agent"))

    content_length = request.headers.get("content-length")
    if content_length is not None and content_length.isdigit() and int(content_length) > MAX_REQUEST_SIZE:
        return render_api_error(BadRequestError(message=f"Request body exceeds {MAX_REQUEST_SIZE} bytes"))

    started = time.perf_counter()
    response = await call_next(request)
    app_logging.performance_metric(
        f"{request.method} {request.url.path}",
        (time.perf_counter() - started) * 1000,
    )
    return response


def run() -> None:
    """Serve the application with uvicorn on the configured port."""
    uvicorn.run("liga.main:app", host="0.0.0.0", port=get_settings().port)
