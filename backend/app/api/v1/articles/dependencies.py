"""FastAPI dependencies for service injection."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.db import get_session
from app.services.articles.article_service import ArticleService


async def get_article_service(session: Annotated[AsyncSession, Depends(get_session)]) -> ArticleService:
    return ArticleService(session)


ArticleServiceDep = Annotated[ArticleService, Depends(get_article_service)]
