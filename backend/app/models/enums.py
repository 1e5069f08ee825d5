"""Enum definitions for database models."""

from enum import StrEnum


class RepairStatus(StrEnum):
    """Status of a repair request."""

    PENDING = "pending"  # Pending review
    IN_PROGRESS = "in_progress"  # Under repair
    WAITING_PARTS = "waiting_parts"
    COMPLETED = "completed"  # Repaired
    DELIVERED = "delivered"  # Handed back to the customer
    CANCELED = "canceled"
