"""Category management service.

Categories are addressed by name, so names are unique among active
categories. Deleting a category is a soft delete.
"""

from typing import Any

import structlog
from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from app.models.category import Category
from app.services.categories.exceptions import CategoryAlreadyExists, CategoryNotFound
from app.utils.datetime_utils import utc_now

logger = structlog.get_logger(__name__)


class CategoryService:
    """Service for category operations."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_categories(self, *, skip: int = 0, limit: int = 50) -> tuple[list[Category], int]:
        """List active categories, newest first. Returns (items, total_count)."""
        statement = (
            select(Category)
            .where(Category.deleted_at.is_(None))  # type: ignore[union-attr]
            .order_by(Category.id.desc())  # type: ignore[union-attr]
            .offset(skip)
            .limit(limit)
        )
        result = await self.session.execute(statement)
        items = list(result.scalars().all())

        count_statement = (
            select(func.count()).select_from(Category).where(Category.deleted_at.is_(None))  # type: ignore[union-attr]
        )
        total = (await self.session.execute(count_statement)).scalar() or 0

        return items, total

    async def _find(self, name: str) -> Category | None:
        statement = select(Category).where(
            Category.name == name,
            Category.deleted_at.is_(None),  # type: ignore[union-attr]
        )
        result = await self.session.execute(statement)
        return result.scalars().first()

    async def get_category(self, name: str) -> Category:
        category = await self._find(name)
        if category is None:
            raise CategoryNotFound()
        return category

    async def create_category(self, *, name: str, description: str | None = None) -> Category:
        if await self._find(name) is not None:
            raise CategoryAlreadyExists(f"Category {name!r} already exists")

        category = Category(name=name, description=description)
        self.session.add(category)
        await self.session.commit()

        logger.info("Created category", category_id=category.id, name=name)
        return category

    async def update_category(self, name: str, **fields: Any) -> Category:
        category = await self.get_category(name)
        new_name = fields.get("name")
        if new_name and new_name != name and await self._find(new_name) is not None:
            raise CategoryAlreadyExists(f"Category {new_name!r} already exists")

        for key, value in fields.items():
            setattr(category, key, value)
        category.updated_at = utc_now()
        await self.session.commit()

        logger.info("Updated category", category_id=category.id, fields=sorted(fields))
        return category

    async def delete_category(self, name: str) -> None:
        category = await self.get_category(name)
        category.deleted_at = utc_now()
        await self.session.commit()

        logger.info("Deleted category", category_id=category.id, name=name)
