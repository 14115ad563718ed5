"""
FastAPI Application Setup.

Main application factory for the Student Registry REST API.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from student_registry.api.middleware.auth import BasicAuthMiddleware
from student_registry.api.middleware.logging import RequestLoggingMiddleware
from student_registry.api.routes import health, students
from student_registry.api.schemas.exceptions import APIException, ValidationError
from student_registry.config import Settings, get_settings
from student_registry.version import __version__

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
PUBLIC_PATHS = {"/health", "/docs", "/redoc", "/openapi.json"}

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Configure root logging for the API process."""
    logging.basicConfig(level=level, format=LOG_FORMAT)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Log startup and shutdown of the API."""
    logger.info("Student Registry API starting up...")
    logger.info(f"Version: {__version__}")

    yield

    logger.info("Student Registry API shutting down...")


def _validation_fields(exc: RequestValidationError) -> dict[str, str]:
    """Flatten FastAPI validation errors into field -> message."""
    fields: dict[str, str] = {}
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        fields[".".join(loc) or "body"] = error.get("msg", "invalid value")
    return fields


def create_app(settings: Settings | None = None, title: str = "Student Registry API") -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Application settings (read from the environment if omitted)
        title: Application title for OpenAPI docs

    Returns:
        Configured FastAPI application instance
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title=title,
        description="REST API for registering students",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # Middleware added last runs first: logging wraps authentication
    app.add_middleware(
        BasicAuthMiddleware,
        username=settings.auth_username,
        password=settings.auth_password,
        require_auth=settings.require_auth,
        public_paths=PUBLIC_PATHS,
    )
    if settings.require_auth:
        logger.info("Authentication middleware enabled (SR_REQUIRE_AUTH=true)")
    else:
        logger.warning("Authentication DISABLED (SR_REQUIRE_AUTH=false)")
    app.add_middleware(RequestLoggingMiddleware)

    app.include_router(
        health.router,
        prefix="/health",
        tags=["Health"],
    )
    app.include_router(
        students.router,
        prefix="/student",
        tags=["Students"],
    )

    @app.exception_handler(APIException)
    async def api_exception_handler(request: Request, exc: APIException) -> JSONResponse:
        """Handle API exceptions with proper error responses."""
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "error": {
                    "type": exc.error_type,
                    "message": exc.message,
                    "detail": exc.detail,
                }
            },
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Report malformed request bodies as 400 with per-field messages."""
        error = ValidationError(fields=_validation_fields(exc))
        logger.info(f"Rejected malformed request to {request.url.path}: {error.fields}")
        return JSONResponse(
            status_code=error.status_code,
            content={
                "error": {
                    "type": error.error_type,
                    "message": error.message,
                    "fields": error.fields,
                }
            },
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception(f"Unhandled exception: {exc}")
        return JSONResponse(
            status_code=500,
            content={
                "error": {
                    "type": "internal_error",
                    "message": "An unexpected error occurred",
                    "detail": str(exc) if logger.isEnabledFor(logging.DEBUG) else None,
                }
            },
        )

    return app
