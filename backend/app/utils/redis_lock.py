"""Redis-based distributed locking utilities."""

import asyncio
import time
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from uuid import uuid4

import structlog
from redis.asyncio import Redis
from redis.exceptions import WatchError

logger = structlog.get_logger(__name__)

KEY_PREFIX = "RedisLock:"


class LockUnavailable(Exception):
    """Raised when lock cannot be acquired within the blocking timeout."""

    pass


class LockLost(Exception):
    """Raised when the lease ran out while the block was still running."""

    pass


def _client_or_default(client: Redis | None) -> Redis:
    if client is not None:
        return client
    from app.utils.redis import redis_client

    return redis_client


def _decode(value: bytes | str | None) -> str | None:
    if isinstance(value, bytes):
        return value.decode()
    return value


class LockHandle:
    """Handle yielded by RedisLock, used to check ownership mid-block."""

    def __init__(self, client: Redis, key: str, token: str):
        self.client = client
        self.key = key
        self.token = token

    async def is_held(self) -> bool:
        return _decode(await self.client.get(self.key)) == self.token

    async def ensure_held(self) -> None:
        """Raise LockLost unless the key still carries our token.

        Call this right before a write that must only happen under the lock.
        """
        if not await self.is_held():
            logger.warning("Lock lease expired while held", key=self.key)
            raise LockLost(f"Lock lost: {self.key}")


async def _release(client: Redis, key: str, token: str) -> bool:
    """Delete the lock key only if it still carries our token.

    Returns False when the lease had already expired.
    """
    async with client.pipeline(transaction=True) as pipe:
        try:
            await pipe.watch(key)
            current = _decode(await pipe.get(key))
            if current != token:
                logger.warning("Lock lost before release", key=key)
                return False
            pipe.multi()
            pipe.delete(key)
            await pipe.execute()
        except WatchError:
            logger.warning("Lock changed during release", key=key)
            return False
    return True


@asynccontextmanager
async def RedisLock(
    key: str,
    ttl: float = 60,
    *,
    blocking_timeout: float = 0,
    poll_interval: float = 0.05,
    auto_release: bool = True,
    client: Redis | None = None,
) -> AsyncGenerator[LockHandle]:
    """Distributed lock using Redis SET NX with a lease (TTL).

    The with block ONLY executes if the lock is acquired. Acquisition is retried
    every `poll_interval` seconds until `blocking_timeout` elapses, after which
    LockUnavailable is raised. A holder that crashes is released by the lease.

    If the lease expires before the block finishes, leaving the block raises
    LockLost (unless the block already raised). Work that must not run without
    the lock should call `handle.ensure_held()` first.

    Basic usage (fail immediately if lock is taken):
        try:
            async with RedisLock("my-lock", ttl=60):
                await do_work()
        except LockUnavailable:
            logger.debug("Lock not acquired, skipping")

    Wait up to 3 seconds for the lock, hold it for at most 5:
        async with RedisLock("counter", ttl=5, blocking_timeout=3) as lock:
            value = await read_counter()
            await lock.ensure_held()
            await write_counter(value + 1)

    For deduplication (don't release on exit, let TTL expire):
        async with RedisLock("task:123", ttl=300, auto_release=False):
            await dispatch_task()

    Args:
        key: Redis key for the lock (will be prefixed with "RedisLock:")
        ttl: Lease in seconds; the key expires after this even if never released
        blocking_timeout: Seconds to keep retrying before giving up (0 = single attempt)
        poll_interval: Seconds between acquisition attempts
        auto_release: If True, release lock on context exit. If False, let TTL expire.
        client: Redis client to use (defaults to the shared client)
    """
    redis = _client_or_default(client)
    full_key = f"{KEY_PREFIX}{key}"
    token = uuid4().hex
    lease_ms = max(1, int(ttl * 1000))
    deadline = time.monotonic() + blocking_timeout

    while not await redis.set(full_key, token, nx=True, px=lease_ms):
        if time.monotonic() >= deadline:
            raise LockUnavailable(f"Could not acquire lock: {full_key}")
        await asyncio.sleep(poll_interval)

    try:
        yield LockHandle(redis, full_key, token)
    except BaseException:
        if auto_release:
            await _release(redis, full_key, token)
        raise

    if auto_release and not await _release(redis, full_key, token):
        raise LockLost(f"Lock lost before release: {full_key}")
