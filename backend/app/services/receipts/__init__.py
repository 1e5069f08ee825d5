"""Receipt number generation (distributed lock + counter store)."""

from app.services.receipts.counter_store import CounterStore, InMemoryCounterStore, RedisCounterStore
from app.services.receipts.exceptions import (
    LockTimeout,
    ReceiptLockLost,
    ReceiptNumberError,
    ReceiptNumberOverflow,
    ReceiptStoreUnavailable,
)
from app.services.receipts.generator import (
    ReceiptNumberGenerator,
    format_receipt_number,
    is_receipt_number,
    parse_receipt_number,
)
from app.services.receipts.locks import HeldLock, LockService, RedisLockService

__all__ = [
    "CounterStore",
    "HeldLock",
    "InMemoryCounterStore",
    "LockService",
    "LockTimeout",
    "ReceiptLockLost",
    "ReceiptNumberError",
    "ReceiptNumberGenerator",
    "ReceiptNumberOverflow",
    "ReceiptStoreUnavailable",
    "RedisCounterStore",
    "RedisLockService",
    "format_receipt_number",
    "is_receipt_number",
    "parse_receipt_number",
]
