from __future__ import annotations

from fastapi import APIRouter, Response, status

from rbo.infrastructure.cache.redis_client import ping_redis
from rbo.infrastructure.db.client import ping_database

router = APIRouter()


@router.get("/health/live")
def live() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/health/ready")
def ready(response: Response) -> dict[str, object]:
    mongodb_ready = ping_database(timeout_seconds=1.0)
    redis_ready = ping_redis(timeout_seconds=1.0)

    if mongodb_ready and redis_ready:
        return {"status": "ok"}

    response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return {
        "status": "unavailable",
        "checks": {"mongodb": mongodb_ready, "redis": redis_ready},
    }
