"""
Health check endpoints.

Provides a liveness check. The service has no external dependencies, so
there is no separate readiness check.
"""

from fastapi import APIRouter
from pydantic import BaseModel

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: str


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """
    Liveness check.

    Returns healthy if the service is running.
    """
    return HealthResponse(status="healthy")
