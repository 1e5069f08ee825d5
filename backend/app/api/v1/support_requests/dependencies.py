"""FastAPI dependencies for service injection."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.db import get_session
from app.services.support_requests.support_request_service import SupportRequestService


async def get_support_request_service(session: Annotated[AsyncSession, Depends(get_session)]) -> SupportRequestService:
    return SupportRequestService(session)


SupportRequestServiceDep = Annotated[SupportRequestService, Depends(get_support_request_service)]
