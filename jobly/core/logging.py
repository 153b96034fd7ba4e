"""
Structured logging for the Jobly API.

Every log line emitted while serving a request carries ``request_id``, and,
once the bearer token has been decoded, the caller's ``username`` and
``is_admin``. Development renders to the console; every other environment
writes JSON lines.
"""
import logging
import sys
import time
import uuid
from typing import Optional

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from jobly.core.config import Settings

REQUEST_ID_HEADER = "X-Request-ID"


def setup_logging(settings: Settings) -> None:
    """Configure structlog and route stdlib logging through it."""
    if settings.environment == "development":
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.DEBUG if settings.debug else logging.INFO)

    # Our own request_completed line replaces uvicorn's access log
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    # SQL statements only when DB_ECHO is on
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.db_echo else logging.WARNING
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a named structlog logger."""
    return structlog.get_logger(name)


def bind_principal(username: Optional[str], is_admin: bool = False) -> None:
    """Attach the authenticated caller to every following log line."""
    if username is None:
        structlog.contextvars.unbind_contextvars("username", "is_admin")
        return
    structlog.contextvars.bind_contextvars(username=username, is_admin=is_admin)


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    Correlate log lines per request.

    Binds ``request_id`` (taken from ``X-Request-ID`` or generated) and echoes
    it back, then logs one ``request_completed`` event with the status, the
    duration and the caller the auth chain resolved, if any.
    """

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(request_id=request_id)

        started = time.perf_counter()
        response = await call_next(request)
        duration_ms = round((time.perf_counter() - started) * 1000, 2)

        # Same scope, so the principal set by ``authenticate`` is visible here
        principal = getattr(request.state, "principal", None)
        get_logger(__name__).info(
            "request_completed",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            duration_ms=duration_ms,
            username=principal.username if principal else None,
        )

        response.headers[REQUEST_ID_HEADER] = request_id
        return response
