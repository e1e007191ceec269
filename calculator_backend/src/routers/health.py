"""Health and welcome endpoints."""
from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter

from src.core.config import get_settings
from src.models.calculation import HealthStatus, WelcomeResponse

router = APIRouter(tags=["health"])

ENDPOINTS = ["/health", "/calculate/sum", "/calculate/product"]


def _utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with millisecond precision and a Z suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


# PUBLIC_INTERFACE
@router.get("/health", response_model=HealthStatus, summary="Health Check", description="Liveness probe; always healthy while the process is up.", operation_id="health_check")
def health_check():
    """Return a health status stamped with the current time."""
    return HealthStatus(status="healthy", timestamp=_utc_timestamp())


# PUBLIC_INTERFACE
@router.get("/", response_model=WelcomeResponse, summary="Welcome", description="Service banner listing available endpoints.", operation_id="welcome")
def welcome():
    """Return the static welcome payload."""
    settings = get_settings()
    return WelcomeResponse(
        message=f"Welcome to {settings.app_name}",
        version=settings.app_version,
        endpoints=list(ENDPOINTS),
    )
