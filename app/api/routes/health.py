from datetime import datetime, timezone

from fastapi import APIRouter

from app.core.config import get_settings

router = APIRouter()


@router.get("/healthz")
async def healthcheck() -> dict[str, str]:
    """Liveness probe; does not touch the database."""
    settings = get_settings()
    return {
        "status": "ok",
        "service": settings.app_name,
        "database": "configured" if settings.database_url else "missing",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
