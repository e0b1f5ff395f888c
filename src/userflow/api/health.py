"""Health check endpoints for monitoring and load balancer probes."""
import logging
from typing import Literal

from fastapi import APIRouter
from pydantic import BaseModel

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


class HealthStatus(BaseModel):
    """Health check response."""

    status: Literal["healthy", "unhealthy"]
    version: str


@router.get("/health", response_model=HealthStatus)
async def health_check() -> HealthStatus:
    """
    Basic health check endpoint.

    Used by load balancers and the Functions/App Service health probe.
    Returns 200 if the service is running.
    """
    from userflow import __version__

    return HealthStatus(status="healthy", version=__version__)


@router.get("/health/live")
async def liveness_check() -> dict:
    """Liveness check - minimal endpoint. Returns 200 if process is alive."""
    return {"alive": True}
