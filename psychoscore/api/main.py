"""Main FastAPI application module for PsychoScore.

This module creates and configures the FastAPI application instance with all
necessary middleware, routers, and exception handlers.
"""

import time
from contextlib import asynccontextmanager
from typing import Dict

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from psychoscore.api.middleware.logging_middleware import LoggingMiddleware
from psychoscore.api.middleware.request_id import RequestIDMiddleware, get_request_id
from psychoscore.core.config import get_settings
from psychoscore.schemas.base import ErrorResponse, ResponseMetadata
from psychoscore.utils.constants import ErrorCodes
from psychoscore.utils.exceptions import PsychoScoreError, ValidationError, handle_exception_chain
from psychoscore.utils.logger import get_logger

settings = get_settings()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle events.

    Args:
        app: FastAPI application instance
    """
    logger.info(
        "Starting PsychoScore API",
        extra={
            "app_name": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "environment": settings.APP_ENV,
        }
    )

    yield

    logger.info("PsychoScore API shut down")


def create_application() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        FastAPI: Configured FastAPI application instance
    """
    app = FastAPI(
        title=settings.APP_NAME,
        description="Assessment scoring and interpretation engine",
        version=settings.APP_VERSION,
        docs_url=f"{settings.API_V1_PREFIX}/docs" if settings.ENABLE_API_DOCS else None,
        redoc_url=f"{settings.API_V1_PREFIX}/redoc" if settings.ENABLE_API_DOCS else None,
        openapi_url=f"{settings.API_V1_PREFIX}/openapi.json" if settings.ENABLE_API_DOCS else None,
        lifespan=lifespan,
    )

    app = register_exception_handlers(app)
    app = register_middleware(app)
    app = register_routers(app)
    app = register_root(app)

    return app


def _response_meta(request: Request) -> ResponseMetadata:
    request_id = get_request_id() or getattr(request.state, "request_id", None)
    return ResponseMetadata(request_id=request_id)


def _error_json(status_code: int, error: ErrorResponse) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=error.model_dump(mode="json"))


def register_exception_handlers(app: FastAPI) -> FastAPI:
    """Register custom exception handlers.

    Args:
        app: FastAPI application instance

    Returns:
        FastAPI: Application with exception handlers registered
    """

    @app.exception_handler(ValidationError)
    async def input_validation_handler(request: Request, exc: ValidationError) -> JSONResponse:
        """Structurally invalid assessment input."""
        logger.warning(
            f"Rejected assessment input: {exc.message}",
            extra={"path": request.url.path, "validation_errors": exc.validation_errors}
        )
        return _error_json(
            status.HTTP_422_UNPROCESSABLE_ENTITY,
            ErrorResponse.from_exception(exc, meta=_response_meta(request))
        )

    @app.exception_handler(PsychoScoreError)
    async def application_error_handler(request: Request, exc: PsychoScoreError) -> JSONResponse:
        logger.error(
            f"Application error: {exc}",
            extra={"path": request.url.path, "error_code": exc.error_code}
        )
        return _error_json(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            ErrorResponse.from_exception(exc, meta=_response_meta(request))
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        """Handle HTTP exceptions."""
        logger.warning(
            f"HTTP exception: {exc.detail}",
            extra={"status_code": exc.status_code, "path": request.url.path}
        )
        return _error_json(
            exc.status_code,
            ErrorResponse.create(
                message=str(exc.detail),
                code=ErrorCodes.HTTP_ERROR,
                meta=_response_meta(request)
            )
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        """Handle request body and parameter validation errors."""
        errors = [
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in exc.errors()
        ]
        logger.warning(
            "Request validation error",
            extra={"path": request.url.path, "validation_errors": errors}
        )
        return _error_json(
            status.HTTP_422_UNPROCESSABLE_ENTITY,
            ErrorResponse.create(
                message="Request validation failed",
                code=ErrorCodes.VALIDATION_ERROR,
                details={"validation_errors": errors},
                meta=_response_meta(request)
            )
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Handle uncaught exceptions."""
        logger.error(
            f"Unhandled exception: {exc}",
            extra={"exception_type": type(exc).__name__, "path": request.url.path},
            exc_info=True,
        )

        # Internal details stay out of non-debug responses
        details = {"chain": handle_exception_chain(exc)} if settings.APP_DEBUG else None
        message = str(exc) if settings.APP_DEBUG else "An internal error occurred"

        return _error_json(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            ErrorResponse.create(
                message=message,
                code=ErrorCodes.INTERNAL_ERROR,
                details=details,
                meta=_response_meta(request)
            )
        )

    return app


def register_middleware(app: FastAPI) -> FastAPI:
    """Register application middleware.

    Middleware runs in reverse registration order, so the request id is bound
    before the logging middleware sees the request.

    Args:
        app: FastAPI application instance

    Returns:
        FastAPI: Application with middleware registered
    """
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID", "X-Process-Time"],
    )

    app.add_middleware(GZipMiddleware, minimum_size=1024)

    @app.middleware("http")
    async def add_process_time_header(request: Request, call_next):
        """Add processing time to response headers."""
        start_time = time.perf_counter()
        response = await call_next(request)
        response.headers["X-Process-Time"] = f"{time.perf_counter() - start_time:.3f}"
        return response

    return app


def register_routers(app: FastAPI) -> FastAPI:
    """Register API routers.

    Args:
        app: FastAPI application instance

    Returns:
        FastAPI: Application with routers registered
    """
    # Import routers here to avoid circular imports
    from psychoscore.routers import analysis, health

    api_prefix = settings.API_V1_PREFIX

    app.include_router(
        health.router,
        prefix=f"{api_prefix}/health",
        tags=["Health"],
    )

    app.include_router(
        analysis.router,
        prefix=f"{api_prefix}/analysis",
        tags=["Analysis"],
    )

    return app


def register_root(app: FastAPI) -> FastAPI:
    @app.get(
        "/",
        tags=["Root"],
        summary="Root endpoint",
        response_model=Dict[str, str],
    )
    async def root() -> Dict[str, str]:
        """Root endpoint with API information."""
        return {
            "message": f"Welcome to {settings.APP_NAME}",
            "version": settings.APP_VERSION,
            "docs": f"{settings.API_V1_PREFIX}/docs",
            "health": f"{settings.API_V1_PREFIX}/health",
        }

    return app


app = create_application()

__all__ = ["app", "create_application"]
