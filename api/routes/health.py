"""
Health check endpoints.

Provides endpoints for monitoring application health and readiness.
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from modules.identity.interfaces import IUserStore
from shared.config import get_settings

from ..dependencies import get_user_store

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    service: str
    version: str


class ReadinessResponse(BaseModel):
    """Readiness check response model."""

    status: str
    storage: str
    users: int


@router.get("/health", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """
    Basic health check endpoint.

    Returns 200 if the API is running.
    """
    settings = get_settings()
    return HealthResponse(
        status="healthy",
        service=settings.app_name,
        version=settings.app_version,
    )


@router.get("/ready", response_model=ReadinessResponse)
def readiness_check(
    store: IUserStore = Depends(get_user_store),
) -> ReadinessResponse:
    """
    Readiness check endpoint.

    Reports the storage backend and how many users it holds.
    """
    return ReadinessResponse(
        status="ready",
        storage=type(store).__name__,
        users=len(store.list_users()),
    )
