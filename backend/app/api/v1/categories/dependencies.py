"""FastAPI dependencies for service injection."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.db import get_session
from app.services.categories.category_service import CategoryService
from app.services.categories.subcategory_service import SubcategoryService


async def get_category_service(session: Annotated[AsyncSession, Depends(get_session)]) -> CategoryService:
    return CategoryService(session)


async def get_subcategory_service(session: Annotated[AsyncSession, Depends(get_session)]) -> SubcategoryService:
    return SubcategoryService(session)


CategoryServiceDep = Annotated[CategoryService, Depends(get_category_service)]
SubcategoryServiceDep = Annotated[SubcategoryService, Depends(get_subcategory_service)]
