"""Health check and status endpoints for the various hosting platforms."""

from datetime import UTC, datetime
from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from lead_api.api.dependencies import get_app_settings
from lead_api.config import Settings

SERVICE_NAME = "ai-lead-strategies-backend"
SERVICE_VERSION = "0.1.0"

router = APIRouter(tags=["health"])


@router.get("/")
async def root():
    """Service info. Some platforms probe the root path."""
    return {
        "message": "AI Lead Strategies Backend API",
        "status": "running",
        "health": "/health",
        "api": "/api/status",
    }


@router.get("/health")
async def health_check(settings: Annotated[Settings, Depends(get_app_settings)]):
    """Health check endpoint."""
    return {
        "status": "healthy",
        "timestamp": datetime.now(UTC).isoformat(),
        "service": SERVICE_NAME,
        "version": SERVICE_VERSION,
        "environment": settings.environment,
    }


@router.get("/healthz", response_class=PlainTextResponse)
async def healthz():
    return "OK"


@router.get("/_health")
async def underscore_health():
    return {"status": "ok"}


@router.get("/ping", response_class=PlainTextResponse)
async def ping():
    return "pong"


@router.get("/api/status")
async def api_status():
    return {
        "message": "AI Lead Strategies API is running!",
        "platforms": ["tackle", "social-syncs", "videosite", "lead-genius"],
    }
