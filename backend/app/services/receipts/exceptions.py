"""Receipt numbering exceptions.

Any of these aborts the creation of the entity that asked for a number.
"""

from app.services.exceptions import ServiceError


class ReceiptNumberError(ServiceError):
    """Base class for receipt number generation failures."""

    pass


class LockTimeout(ReceiptNumberError):
    """The numbering lock was not acquired within the wait bound."""

    def __init__(self, lock_name: str, wait: float):
        self.lock_name = lock_name
        self.wait = wait
        super().__init__(f"Could not acquire lock {lock_name!r} within {wait}s")


class ReceiptLockLost(ReceiptNumberError):
    """The numbering lock's lease expired before the counter was written."""

    def __init__(self, lock_name: str, lease: float):
        self.lock_name = lock_name
        self.lease = lease
        super().__init__(f"Lock {lock_name!r} expired after its {lease}s lease")


class ReceiptStoreUnavailable(ReceiptNumberError):
    """The lock or counter store could not be reached."""

    pass


class ReceiptNumberOverflow(ReceiptNumberError):
    """The next sequence value no longer fits the fixed-width format."""

    def __init__(self, value: int, width: int):
        self.value = value
        self.width = width
        super().__init__(f"Sequence value {value} exceeds {width} digits")
