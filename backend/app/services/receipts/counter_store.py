"""Key-value stores holding the last issued sequence value."""

import time
from collections.abc import Callable
from typing import Protocol

from redis.asyncio import Redis
from redis.exceptions import RedisError

from app.services.receipts.exceptions import ReceiptStoreUnavailable


class CounterStore(Protocol):
    """Simple get/set integer storage. Callers serialize access with a lock."""

    async def get(self, key: str, default: int = 0) -> int: ...

    async def set(self, key: str, value: int, ttl: int | None = None) -> None: ...


class RedisCounterStore:
    """CounterStore kept in Redis, shared by every API instance."""

    def __init__(self, client: Redis):
        self._client = client

    async def get(self, key: str, default: int = 0) -> int:
        try:
            raw = await self._client.get(key)
        except RedisError as e:
            raise ReceiptStoreUnavailable(f"Counter store unavailable: {e}") from e
        if raw is None:
            return default
        try:
            return int(raw)
        except ValueError as e:
            raise ReceiptStoreUnavailable(f"Counter {key!r} holds a non-integer value: {raw!r}") from e

    async def set(self, key: str, value: int, ttl: int | None = None) -> None:
        """Store `value`; a `ttl` of None keeps the key without expiry."""
        try:
            await self._client.set(key, value, ex=ttl)
        except RedisError as e:
            raise ReceiptStoreUnavailable(f"Counter store unavailable: {e}") from e


class InMemoryCounterStore:
    """Process-local CounterStore for tests and single-process tooling."""

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._values: dict[str, tuple[int, float | None]] = {}

    async def get(self, key: str, default: int = 0) -> int:
        entry = self._values.get(key)
        if entry is None:
            return default
        value, expires_at = entry
        if expires_at is not None and self._clock() >= expires_at:
            del self._values[key]
            return default
        return value

    async def set(self, key: str, value: int, ttl: int | None = None) -> None:
        expires_at = self._clock() + ttl if ttl is not None else None
        self._values[key] = (value, expires_at)
