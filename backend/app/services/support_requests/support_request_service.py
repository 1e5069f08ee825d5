"""Support request management service."""

from typing import Any

import structlog
from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from app.models.support_request import SupportRequest
from app.services.support_requests.exceptions import SupportRequestNotFound
from app.utils.datetime_utils import utc_now

logger = structlog.get_logger(__name__)


class SupportRequestService:
    """Service for support request operations."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_support_requests(self, *, skip: int = 0, limit: int = 50) -> tuple[list[SupportRequest], int]:
        """List active support requests, newest first. Returns (items, total_count)."""
        statement = (
            select(SupportRequest)
            .where(SupportRequest.deleted_at.is_(None))  # type: ignore[union-attr]
            .order_by(SupportRequest.id.desc())  # type: ignore[union-attr]
            .offset(skip)
            .limit(limit)
        )
        result = await self.session.execute(statement)
        items = list(result.scalars().all())

        count_statement = (
            select(func.count())
            .select_from(SupportRequest)
            .where(SupportRequest.deleted_at.is_(None))  # type: ignore[union-attr]
        )
        total = (await self.session.execute(count_statement)).scalar() or 0

        return items, total

    async def get_support_request(self, support_request_id: int) -> SupportRequest:
        support_request = await self.session.get(SupportRequest, support_request_id)
        if support_request is None or support_request.deleted_at is not None:
            raise SupportRequestNotFound()
        return support_request

    async def create_support_request(self, **fields: Any) -> SupportRequest:
        support_request = SupportRequest(**fields)
        self.session.add(support_request)
        await self.session.commit()

        logger.info("Created support request", support_request_id=support_request.id)
        return support_request

    async def update_support_request(self, support_request_id: int, **fields: Any) -> SupportRequest:
        support_request = await self.get_support_request(support_request_id)
        for key, value in fields.items():
            setattr(support_request, key, value)
        support_request.updated_at = utc_now()
        await self.session.commit()

        logger.info("Updated support request", support_request_id=support_request_id, fields=sorted(fields))
        return support_request

    async def delete_support_request(self, support_request_id: int) -> None:
        support_request = await self.get_support_request(support_request_id)
        support_request.deleted_at = utc_now()
        await self.session.commit()

        logger.info("Deleted support request", support_request_id=support_request_id)
