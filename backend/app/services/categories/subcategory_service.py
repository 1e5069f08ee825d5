"""Subcategory management service."""

from typing import Any

import structlog
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from sqlmodel import select

from app.models.category import Category, Subcategory
from app.services.categories.exceptions import CategoryNotFound, SubcategoryAlreadyExists, SubcategoryNotFound
from app.utils.datetime_utils import utc_now

logger = structlog.get_logger(__name__)


class SubcategoryService:
    """Service for subcategory operations. Results carry their loaded `category`."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_subcategories(
        self, *, category_id: int | None = None, skip: int = 0, limit: int = 50
    ) -> tuple[list[Subcategory], int]:
        """List active subcategories, newest first. Returns (items, total_count)."""
        conditions = [Subcategory.deleted_at.is_(None)]  # type: ignore[union-attr]
        if category_id is not None:
            conditions.append(Subcategory.category_id == category_id)

        statement = (
            select(Subcategory)
            .where(*conditions)
            .options(selectinload(Subcategory.category))  # type: ignore[arg-type]
            .order_by(Subcategory.id.desc())  # type: ignore[union-attr]
            .offset(skip)
            .limit(limit)
        )
        result = await self.session.execute(statement)
        items = list(result.scalars().all())

        count_statement = select(func.count()).select_from(Subcategory).where(*conditions)
        total = (await self.session.execute(count_statement)).scalar() or 0

        return items, total

    async def get_subcategory(self, subcategory_id: int) -> Subcategory:
        statement = (
            select(Subcategory)
            .where(
                Subcategory.id == subcategory_id,
                Subcategory.deleted_at.is_(None),  # type: ignore[union-attr]
            )
            .options(selectinload(Subcategory.category))  # type: ignore[arg-type]
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(statement)
        subcategory = result.scalars().first()
        if subcategory is None:
            raise SubcategoryNotFound()
        return subcategory

    async def _require_category(self, category_id: int) -> None:
        category = await self.session.get(Category, category_id)
        if category is None or category.deleted_at is not None:
            raise CategoryNotFound()

    async def _commit(self, category_id: int, name: str) -> None:
        # Values are passed in: rollback expires the instance
        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            raise SubcategoryAlreadyExists(f"Category {category_id} already has a subcategory named {name!r}") from e

    async def create_subcategory(
        self, *, category_id: int, name: str, description: str | None = None
    ) -> Subcategory:
        """Create a subcategory under an active category.

        Raises:
            CategoryNotFound: the category does not exist or was deleted.
            SubcategoryAlreadyExists: the name is taken within the category.
        """
        await self._require_category(category_id)

        subcategory = Subcategory(category_id=category_id, name=name, description=description)
        self.session.add(subcategory)
        await self._commit(category_id, name)

        logger.info("Created subcategory", subcategory_id=subcategory.id, category_id=category_id, name=name)
        return await self.get_subcategory(subcategory.id)  # type: ignore[arg-type]

    async def update_subcategory(self, subcategory_id: int, **fields: Any) -> Subcategory:
        subcategory = await self.get_subcategory(subcategory_id)
        if "category_id" in fields:
            await self._require_category(fields["category_id"])

        for key, value in fields.items():
            setattr(subcategory, key, value)
        subcategory.updated_at = utc_now()
        await self._commit(subcategory.category_id, subcategory.name)

        logger.info("Updated subcategory", subcategory_id=subcategory_id, fields=sorted(fields))
        return await self.get_subcategory(subcategory_id)

    async def delete_subcategory(self, subcategory_id: int) -> None:
        subcategory = await self.get_subcategory(subcategory_id)
        subcategory.deleted_at = utc_now()
        await self.session.commit()

        logger.info("Deleted subcategory", subcategory_id=subcategory_id)
