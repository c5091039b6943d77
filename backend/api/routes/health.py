"""
Health check endpoints.

Provides endpoints for monitoring application health and readiness.
"""

from fastapi import APIRouter
from pydantic import BaseModel

from shared.config import get_settings

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str


class ReadinessResponse(BaseModel):
    """Readiness check response model."""

    status: str
    storage: str
    payments: str


@router.get("/")
async def root() -> str:
    """Plain banner so a browser hit on the root shows the service is up."""
    return "Forum backend is running"


@router.get("/api/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Basic health check endpoint.

    Returns 200 if the API is running.
    """
    return HealthResponse(status="healthy", version=get_settings().app_version)


@router.get("/api/ready", response_model=ReadinessResponse)
async def readiness_check() -> ReadinessResponse:
    """
    Readiness check endpoint.

    Reports which storage backend is configured and whether a Stripe key
    is present. It does not open connections.
    """
    settings = get_settings()
    return ReadinessResponse(
        status="ready",
        storage=settings.storage_backend,
        payments="configured" if settings.stripe_secret_key else "not_configured",
    )
