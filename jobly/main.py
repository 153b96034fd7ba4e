"""
Jobly API - FastAPI Application Entry Point.

Companies, the jobs they post, and the users who apply to them.
"""
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from jobly.api.routes import api_router
from jobly.core.config import Settings, get_settings
from jobly.core.database import close_db, create_engine, create_session_maker, init_db
from jobly.core.exceptions import APIException
from jobly.core.logging import (
    REQUEST_ID_HEADER,
    RequestContextMiddleware,
    get_logger,
    setup_logging,
)

logger = get_logger(__name__)


def _error_body(status_code: int, code: str, message, details=None) -> dict:
    return {
        "error": code,
        "message": message,
        "status": status_code,
        "details": details,
    }


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the application.

    ``settings`` is fixed for the lifetime of the app; the engine and session
    factory built from it live on ``app.state`` for the dependencies to use.
    """
    settings = settings or get_settings()
    engine = create_engine(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler — startup and shutdown."""
        setup_logging(settings)
        logger.info("starting_app", app_name=settings.app_name, env=settings.environment)
        await init_db(engine)
        logger.info("database_initialized")

        yield

        await close_db(engine)
        logger.info("shutting_down")

    app = FastAPI(
        title=settings.app_name,
        description="Companies, jobs and applications",
        version=settings.app_version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_maker = create_session_maker(engine)

    # Request id, caller and timing on every log line
    app.add_middleware(RequestContextMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", REQUEST_ID_HEADER],
    )

    # Exception handlers
    @app.exception_handler(APIException)
    async def api_exception_handler(request: Request, exc: APIException):
        """Handle custom API exceptions."""
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(exc.status_code, exc.code, exc.message, exc.details),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Schema violations are the caller's fault: 400 with one message per error."""
        messages = [
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
            for err in exc.errors()
        ]
        return JSONResponse(
            status_code=400,
            content=_error_body(400, "VALIDATION_ERROR", messages),
        )

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        """Handle unexpected exceptions — log full detail, return sanitized message."""
        logger.error(
            "unhandled_exception",
            exc_type=type(exc).__name__,
            exc_message=str(exc),
            path=request.url.path,
            exc_info=True,
        )
        message = str(exc) if settings.debug else "An unexpected error occurred"
        return JSONResponse(
            status_code=500,
            content=_error_body(500, "INTERNAL_ERROR", message),
        )

    app.include_router(api_router, prefix=settings.api_prefix)

    @app.get("/")
    async def root():
        """Root endpoint - API info."""
        return {
            "name": settings.app_name,
            "version": settings.app_version,
            "docs": "/docs" if settings.debug else None,
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "jobly.main:app",
        host="0.0.0.0",
        port=8000,
        reload=get_settings().debug,
    )
