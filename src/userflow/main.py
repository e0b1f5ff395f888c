"""FastAPI application entry point.

Hosts the user-flow webhooks called by Azure AD B2C API connectors and
Entra External ID custom authentication extensions.
"""
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from userflow import __version__
from userflow.api.health import router as health_router
from userflow.api.webhooks.api_connector import router as api_connector_router
from userflow.api.webhooks.attribute_collection import router as attribute_collection_router
from userflow.config import get_settings
from userflow.core.errors import InvalidArgumentError
from userflow.core.logging import setup_logging
from userflow.core.middleware import CorrelationIdMiddleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan manager for startup/shutdown events."""
    setup_logging()
    settings = get_settings()
    logger.info(
        "User flow webhooks starting",
        extra={
            "version": __version__,
            "environment": settings.environment,
        },
    )
    if not settings.basic_auth_configured:
        logger.warning("BASIC_AUTH_USERNAME/BASIC_AUTH_PASSWORD not set; all webhook calls will be rejected")

    yield

    logger.info("User flow webhooks shutting down")


def create_app() -> FastAPI:
    """
    Application factory for creating the FastAPI app.

    Returns:
        Configured FastAPI application
    """
    settings = get_settings()

    app = FastAPI(
        title="User Flow Webhooks",
        description="Response encoders for Entra External ID and Azure AD B2C user-flow webhooks",
        version=__version__,
        docs_url="/docs" if not settings.is_production else None,
        redoc_url="/redoc" if not settings.is_production else None,
        openapi_url="/openapi.json" if not settings.is_production else None,
        lifespan=lifespan,
    )

    app.add_middleware(CorrelationIdMiddleware)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Handle Pydantic validation errors."""
        logger.warning(
            "Request validation failed",
            extra={"errors": exc.errors(), "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"detail": exc.errors()},
        )

    @app.exception_handler(InvalidArgumentError)
    async def invalid_argument_handler(
        request: Request,
        exc: InvalidArgumentError,
    ) -> JSONResponse:
        """A handler passed bad input to an encoder."""
        logger.warning(
            "Invalid argument while encoding response",
            extra={"error": str(exc), "argument": exc.argument, "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": str(exc)},
        )

    app.include_router(health_router)
    app.include_router(api_connector_router, prefix=settings.webhook_prefix)
    app.include_router(attribute_collection_router, prefix=settings.webhook_prefix)

    @app.get("/")
    async def root() -> dict:
        """Root endpoint with API info."""
        return {
            "name": "User Flow Webhooks",
            "version": __version__,
            "docs": "/docs" if not settings.is_production else None,
        }

    return app


# Create the application instance
app = create_app()


def run() -> None:
    """Serve the application with uvicorn using the configured host and port."""
    import uvicorn

    settings = get_settings()
    uvicorn.run("userflow.main:app", host=settings.api_host, port=settings.api_port)
