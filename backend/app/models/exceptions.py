"""Model invariant exceptions raised by ORM event guards."""


class MissingReceiptNumber(Exception):
    """Raised when a RepairRequest reaches INSERT without a receipt number."""

    pass


class ReceiptNumberImmutable(Exception):
    """Raised when an assigned receipt number is changed on UPDATE."""

    pass
