"""
Health check endpoints.
Simple endpoints for monitoring application health and configuration.
"""
from datetime import datetime, timezone
from typing import Dict

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from medrelay.config.settings import Settings, get_settings

API_VERSION = "1.0.0"

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    timestamp: datetime
    version: str
    environment: str
    services: Dict[str, str]


def _state(configured: bool) -> str:
    return "configured" if configured else "not_configured"


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: Settings = Depends(get_settings)):
    """Basic health check with external service configuration status."""
    services = {
        "supabase": _state(settings.supabase_configured),
        "openai": _state(settings.openai_configured),
        "cloudinary": _state(settings.cloudinary_configured),
    }

    return HealthResponse(
        status="ok",
        timestamp=datetime.now(timezone.utc),
        version=API_VERSION,
        environment=settings.environment,
        services=services,
    )
