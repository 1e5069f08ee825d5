"""Shared Redis client."""

from redis.asyncio import Redis

from app.config import settings

# Shared async Redis client - reuse across all utilities
redis_client: Redis = Redis.from_url(settings.redis_url)


async def close_redis() -> None:
    """Close the shared client's connection pool.

    Should be called during application shutdown.
    """
    await redis_client.aclose()
