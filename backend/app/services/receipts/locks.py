"""Named lock services used to serialize receipt numbering."""

from collections.abc import AsyncGenerator
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from typing import Protocol

from redis.asyncio import Redis
from redis.exceptions import RedisError

from app.services.receipts.exceptions import LockTimeout, ReceiptLockLost, ReceiptStoreUnavailable
from app.utils.redis_lock import LockLost, LockUnavailable, RedisLock


class HeldLock(Protocol):
    async def ensure_held(self) -> None:
        """Raise ReceiptLockLost if the lease has run out."""
        ...


class LockService(Protocol):
    """Mutual exclusion with a bounded wait and an automatic lease expiry."""

    def hold(self, name: str, *, lease: float, wait: float) -> AbstractAsyncContextManager[HeldLock]:
        """Hold `name` for the duration of the block.

        Raises LockTimeout if the lock is not granted within `wait` seconds and
        ReceiptLockLost if the lease expired before the block finished.
        """
        ...


class RedisLockService:
    """LockService backed by RedisLock."""

    def __init__(self, client: Redis, *, poll_interval: float = 0.05):
        self._client = client
        self._poll_interval = poll_interval

    @asynccontextmanager
    async def hold(self, name: str, *, lease: float, wait: float) -> AsyncGenerator[HeldLock]:
        try:
            async with RedisLock(
                name,
                ttl=lease,
                blocking_timeout=wait,
                poll_interval=self._poll_interval,
                client=self._client,
            ) as lock:
                yield lock
        except LockUnavailable as e:
            raise LockTimeout(name, wait) from e
        except LockLost as e:
            raise ReceiptLockLost(name, lease) from e
        except RedisError as e:
            raise ReceiptStoreUnavailable(f"Lock store unavailable: {e}") from e
