"""Liveness probe: always 200 while the process can answer."""

from datetime import datetime, timezone

from fastapi import APIRouter

from wedsite.config import settings

router = APIRouter(tags=["Health"])


@router.get("/health")
@router.get("/api/health")
async def health_check() -> dict[str, str]:
    return {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": settings.environment,
        "version": settings.app_version,
    }
