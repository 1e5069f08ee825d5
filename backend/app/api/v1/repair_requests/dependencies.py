"""FastAPI dependencies for service injection."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.db import get_session
from app.services.receipts import ReceiptNumberGenerator
from app.services.repair_requests.repair_request_service import RepairRequestService
from app.utils.redis import redis_client


def get_receipt_number_generator() -> ReceiptNumberGenerator:
    """Get a Redis-backed ReceiptNumberGenerator."""
    return ReceiptNumberGenerator.from_settings(redis_client)


async def get_repair_request_service(
    session: Annotated[AsyncSession, Depends(get_session)],
    generator: Annotated[ReceiptNumberGenerator, Depends(get_receipt_number_generator)],
) -> RepairRequestService:
    """Get a RepairRequestService instance with the current session."""
    return RepairRequestService(session, generator)


# Type aliases for cleaner endpoint signatures
RepairRequestServiceDep = Annotated[RepairRequestService, Depends(get_repair_request_service)]
