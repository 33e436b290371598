"""
Logging configuration and named application events.

Logging must not change program behavior: handler failures are absorbed by
the logging module itself and never surface to callers.
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
SLOW_OPERATION_MS = 1000

logger = logging.getLogger("liga")


def configure_logging(level: str = "INFO") -> None:
    """Configure process-wide logging.

    Args:
        level: The log level string (DEBUG, INFO, WARNING, ERROR).
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )

    # Suppress noisy third-party loggers
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


def startup_info(port: int) -> None:
    logger.info("Starting La Liga de los Muertos backend")
    logger.info("Server will bind to 0.0.0.0:%d", port)
    logger.debug("Debug logging enabled")


def server_ready(port: int) -> None:
    logger.info("Server ready and listening on port %d", port)
    logger.info("Health check available at: http://localhost:%d/v1/health", port)


def shutdown() -> None:
    logger.info("Gracefully shutting down La Liga de los Muertos backend")


def database_info(url: str) -> None:
    logger.info("Connected to database at %s", url)


def schema_init() -> None:
    logger.info("Initializing database schema...")


def schema_success() -> None:
    logger.info("Database schema initialized successfully")


def database_error(error: str) -> None:
    logger.error("Failed to initialize database connection: %s", error)
    logger.error("Please check your database configuration and try again.")


def auth_event(event: str, user_id: str | None = None) -> None:
    if user_id is not None:
        logger.info("Auth event: %s for user %s", event, user_id)
    else:
        logger.info("Auth event: %s", event)


def tournament_event(event: str, tournament_id: str, user_id: str | None = None) -> None:
    if user_id is not None:
        logger.info("Tournament event: %s for tournament %s by user %s", event, tournament_id, user_id)
    else:
        logger.info("Tournament event: %s for tournament %s", event, tournament_id)


def performance_metric(operation: str, duration_ms: float) -> None:
    if duration_ms > SLOW_OPERATION_MS:
        logger.warning("Slow operation: %s took %.0fms", operation, duration_ms)
    else:
        logger.debug("Performance: %s took %.0fms", operation, duration_ms)


def request_debug(method: str, path: str, user_agent: str | None = None) -> None:
    if not logger.isEnabledFor(logging.DEBUG):
        return
    if user_agent:
        logger.debug("%s %s - User-Agent: %s", method, path, user_agent)
    else:
        logger.debug("%s %s", method, path)
