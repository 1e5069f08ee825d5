"""Repair request management service.

Creating a repair request assigns its receipt number exactly once, before the
INSERT, and the whole attempt is rolled back if either numbering or the INSERT
fails.
"""

from typing import Any

import structlog
from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from app.models.repair_request import RepairRequest
from app.services.receipts import ReceiptNumberGenerator
from app.services.repair_requests.exceptions import (
    FieldNotUpdatable,
    RepairRequestCreationFailed,
    RepairRequestNotFound,
)
from app.utils.datetime_utils import utc_now

logger = structlog.get_logger(__name__)

UPDATABLE_FIELDS = frozenset(
    {
        "article_serialnumber",
        "article_accesories",
        "repair_status",
        "repair_details",
        "repair_price",
        "repaired_at",
    }
)


class RepairRequestService:
    """Service for repair request operations."""

    def __init__(self, session: AsyncSession, generator: ReceiptNumberGenerator):
        self.session = session
        self.generator = generator

    async def list_repair_requests(self, *, skip: int = 0, limit: int = 50) -> tuple[list[RepairRequest], int]:
        """List active repair requests, newest first. Returns (items, total_count)."""
        statement = (
            select(RepairRequest)
            .where(RepairRequest.deleted_at.is_(None))  # type: ignore[union-attr]
            .order_by(RepairRequest.id.desc())  # type: ignore[union-attr]
            .offset(skip)
            .limit(limit)
        )
        result = await self.session.execute(statement)
        items = list(result.scalars().all())

        count_statement = (
            select(func.count()).select_from(RepairRequest).where(RepairRequest.deleted_at.is_(None))  # type: ignore[union-attr]
        )
        count_result = await self.session.execute(count_statement)
        total = count_result.scalar() or 0

        return items, total

    async def get_repair_request(self, receipt_number: str) -> RepairRequest:
        statement = select(RepairRequest).where(
            RepairRequest.receipt_number == receipt_number,
            RepairRequest.deleted_at.is_(None),  # type: ignore[union-attr]
        )
        result = await self.session.execute(statement)
        repair_request = result.scalars().first()
        if repair_request is None:
            raise RepairRequestNotFound()
        return repair_request

    async def create_repair_request(self, *, receipt_number: str | None = None, **fields: Any) -> RepairRequest:
        """Create a repair request.

        A non-empty `receipt_number` (fixtures, data imports) is kept verbatim and
        the generator is not called. Otherwise a new number is generated first.

        Raises:
            RepairRequestCreationFailed: numbering, the INSERT or anything in
                between failed; the session is rolled back and no row is
                persisted. The original error is chained as __cause__.
        """
        repair_request = RepairRequest(**fields)
        try:
            repair_request.receipt_number = receipt_number or await self.generator.generate()
            self.session.add(repair_request)
            await self.session.commit()
        except Exception as e:
            # No partial row may survive, whatever failed
            await self.session.rollback()
            logger.error("Repair request creation failed", error=str(e), error_type=type(e).__name__)
            raise RepairRequestCreationFailed(str(e)) from e

        logger.info(
            "Created repair request",
            repair_request_id=repair_request.id,
            receipt_number=repair_request.receipt_number,
        )
        return repair_request

    async def update_repair_request(self, receipt_number: str, **fields: Any) -> RepairRequest:
        """Update the mutable fields of a repair request."""
        not_updatable = set(fields) - UPDATABLE_FIELDS
        if not_updatable:
            raise FieldNotUpdatable(f"Fields cannot be updated: {', '.join(sorted(not_updatable))}")

        repair_request = await self.get_repair_request(receipt_number)
        for key, value in fields.items():
            setattr(repair_request, key, value)
        repair_request.updated_at = utc_now()
        await self.session.commit()

        logger.info("Updated repair request", receipt_number=receipt_number, fields=sorted(fields))
        return repair_request

    async def delete_repair_request(self, receipt_number: str) -> None:
        """Soft delete: the row stays, its receipt number is never reused."""
        repair_request = await self.get_repair_request(receipt_number)
        repair_request.deleted_at = utc_now()
        await self.session.commit()

        logger.info("Deleted repair request", receipt_number=receipt_number)
