"""Receipt number generation for repair requests.

Receipt numbers look like ``RR-000000000001``: a fixed prefix followed by the
sequence value zero-padded to 12 digits. The sequence lives in a shared counter
store; every read-increment-write happens while holding a named lock so that
concurrent API instances never hand out the same number.
"""

import re

import structlog
from redis.asyncio import Redis

from app.config import settings
from app.services.receipts.counter_store import CounterStore, RedisCounterStore
from app.services.receipts.exceptions import LockTimeout, ReceiptLockLost, ReceiptNumberOverflow
from app.services.receipts.locks import LockService, RedisLockService

logger = structlog.get_logger(__name__)

RECEIPT_PREFIX = "RR-"
RECEIPT_DIGITS = 12
RECEIPT_NUMBER_PATTERN = re.compile(rf"^{RECEIPT_PREFIX}\d{{{RECEIPT_DIGITS}}}$")
MAX_SEQUENCE_VALUE = 10**RECEIPT_DIGITS - 1


def format_receipt_number(value: int) -> str:
    """Format a sequence value, e.g. 1 -> "RR-000000000001"."""
    if value < 1 or value > MAX_SEQUENCE_VALUE:
        raise ReceiptNumberOverflow(value, RECEIPT_DIGITS)
    return f"{RECEIPT_PREFIX}{value:0{RECEIPT_DIGITS}d}"


def is_receipt_number(text: str) -> bool:
    return RECEIPT_NUMBER_PATTERN.match(text) is not None


def parse_receipt_number(text: str) -> int:
    """Return the sequence value embedded in a receipt number."""
    if not is_receipt_number(text):
        raise ValueError(f"Not a receipt number: {text!r}")
    return int(text[len(RECEIPT_PREFIX) :])


class ReceiptNumberGenerator:
    """Issues unique, increasing receipt numbers.

    Usage:
        generator = ReceiptNumberGenerator.from_settings(redis_client)
        receipt_number = await generator.generate()

    Failures (LockTimeout, ReceiptLockLost, ReceiptStoreUnavailable,
    ReceiptNumberOverflow) are never retried here; the caller decides whether to
    retry. A retry consumes a new value, so gaps are possible but duplicates are
    not. A caller whose lease ran out never gets a number back.
    """

    def __init__(
        self,
        lock_service: LockService,
        counter_store: CounterStore,
        *,
        lock_name: str = "repair_request_number_lock",
        counter_key: str = "repair_request_last_number",
        lease: float = 5.0,
        wait: float = 3.0,
        counter_ttl: int | None = None,
    ):
        self.lock_service = lock_service
        self.counter_store = counter_store
        self.lock_name = lock_name
        self.counter_key = counter_key
        self.lease = lease
        self.wait = wait
        self.counter_ttl = counter_ttl

    @classmethod
    def from_settings(cls, client: Redis) -> "ReceiptNumberGenerator":
        """Build a Redis-backed generator configured from settings."""
        return cls(
            RedisLockService(client, poll_interval=settings.receipt_lock_poll_interval),
            RedisCounterStore(client),
            lock_name=settings.receipt_lock_name,
            counter_key=settings.receipt_counter_key,
            lease=settings.receipt_lock_lease_seconds,
            wait=settings.receipt_lock_wait_seconds,
            counter_ttl=settings.receipt_counter_ttl_seconds,
        )

    async def generate(self) -> str:
        """Reserve the next sequence value and return it formatted."""
        try:
            async with self.lock_service.hold(self.lock_name, lease=self.lease, wait=self.wait) as lock:
                current = await self.counter_store.get(self.counter_key, default=0)
                next_value = current + 1
                if next_value > MAX_SEQUENCE_VALUE:
                    raise ReceiptNumberOverflow(next_value, RECEIPT_DIGITS)
                await lock.ensure_held()
                await self.counter_store.set(self.counter_key, next_value, ttl=self.counter_ttl)
        except LockTimeout:
            logger.warning("Receipt number lock not acquired", lock=self.lock_name, wait=self.wait)
            raise
        except ReceiptLockLost:
            logger.warning("Receipt number lock lease expired", lock=self.lock_name, lease=self.lease)
            raise

        receipt_number = format_receipt_number(next_value)
        logger.debug("Generated receipt number", receipt_number=receipt_number)
        return receipt_number
