"""Health check endpoints."""

from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, HTTPException
from redis.asyncio import Redis
from redis.exceptions import RedisError

from app.utils.redis import redis_client

logger = structlog.get_logger(__name__)

router = APIRouter()


def get_redis() -> Redis:
    """Get the shared Redis client."""
    return redis_client


@router.get("/health", operation_id="healthCheck")
async def health_check() -> dict[str, str]:
    """Liveness check."""
    return {"status": "healthy"}


@router.get("/health/ready", operation_id="readinessCheck")
async def readiness_check(redis: Annotated[Redis, Depends(get_redis)]) -> dict[str, str]:
    """Readiness check: repair requests cannot be numbered without Redis."""
    try:
        await redis.ping()
    except RedisError as e:
        logger.warning("Redis unavailable", error=str(e))
        raise HTTPException(status_code=503, detail="Redis unavailable")
    return {"status": "ready"}
