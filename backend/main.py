"""
Application factory for FastAPI.

This module provides a factory function for creating FastAPI application instances.
The factory pattern allows for:
- Easy testing with custom settings
- Multiple app instances with different configurations
- Clear separation of app creation from route definitions

Usage:
    from backend.main import create_app
    from backend.settings import Settings

    # Default app (uses get_settings())
    app = create_app()

    # Test app with custom settings
    test_settings = Settings(environment="test", _env_file=None)
    test_app = create_app(settings=test_settings)
"""

import logging
from typing import Optional

import sentry_sdk
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from application.exceptions import RepositoryError, TrainingLogError
from backend.settings import Settings, get_settings

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure a FastAPI application instance.

    Args:
        settings: Optional Settings instance. If not provided, uses get_settings()
                  which loads from environment variables.

    Returns:
        Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    # Initialize Sentry for error tracking
    _init_sentry(settings)

    app = FastAPI(
        title="TotalGrind API",
        description="Training log API for strength athletes and coaches",
        version="1.0.0",
    )

    _configure_cors(app, settings)
    _register_exception_handlers(app)
    _include_routers(app)

    logger.info(f"TotalGrind API created (environment={settings.environment})")
    return app


def _init_sentry(settings: Settings) -> None:
    """Initialize Sentry SDK if DSN is configured."""
    if settings.sentry_dsn:
        sentry_sdk.init(
            dsn=settings.sentry_dsn,
            environment=settings.environment,
            traces_sample_rate=0.1,  # 10% of transactions for performance monitoring
        )
        logger.info("Sentry initialized for totalgrind-api")


def _configure_cors(app: FastAPI, settings: Settings) -> None:
    """Configure CORS middleware for the application."""
    trusted_origins = [
        "http://localhost:3000",
        "http://localhost:5173",
    ]
    trusted_origins.extend(settings.cors_origins_list)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=trusted_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def _register_exception_handlers(app: FastAPI) -> None:
    """Translate application exceptions into JSON error responses."""

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        message = _validation_message(exc)
        logger.warning(f"Rejected request body on {request.method} {request.url.path}: {message}")
        return JSONResponse(status_code=400, content={"error": message})

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RepositoryError)
    async def repository_error_handler(request: Request, exc: RepositoryError) -> JSONResponse:
        logger.error(
            f"Persistence failure on {request.method} {request.url.path}: {exc.message}",
            exc_info=exc,
        )
        return JSONResponse(status_code=500, content={"error": "Internal server error"})

    @app.exception_handler(TrainingLogError)
    async def training_log_error_handler(request: Request, exc: TrainingLogError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error(f"Unhandled application error on {request.url.path}: {exc.message}")
            return JSONResponse(status_code=500, content={"error": "Internal server error"})
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


def _validation_message(exc: RequestValidationError) -> str:
    """First validation error as ``field: reason``, e.g. ``exercises: Field required``."""
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    # loc starts with the request part: body, query, path or header
    field = ".".join(str(part) for part in first.get("loc", ())[1:])
    reason = first.get("msg", "Invalid value")
    return f"{field}: {reason}" if field else reason


def _include_routers(app: FastAPI) -> None:
    """Include all API routers in the application."""
    from api.routers import (
        admin_router,
        blocks_router,
        coach_router,
        days_router,
        health_router,
        progress_router,
        users_router,
    )

    # Health router (no prefix - /health at root)
    app.include_router(health_router)

    # Domain routers (with prefixes defined in each router)
    app.include_router(blocks_router)
    app.include_router(days_router)
    app.include_router(progress_router)
    app.include_router(users_router)
    app.include_router(coach_router)
    app.include_router(admin_router)


# Default app instance for uvicorn
# This allows: uvicorn backend.main:app --reload
app = create_app()
