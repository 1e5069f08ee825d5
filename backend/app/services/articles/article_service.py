"""Article management service."""

from typing import Any

import structlog
from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from app.models.article import Article
from app.models.category import Category, Subcategory
from app.services.articles.exceptions import ArticleNotFound, InvalidArticleCategory
from app.utils.datetime_utils import utc_now

logger = structlog.get_logger(__name__)


class ArticleService:
    """Service for article operations."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_articles(
        self,
        *,
        category_id: int | None = None,
        subcategory_id: int | None = None,
        skip: int = 0,
        limit: int = 50,
    ) -> tuple[list[Article], int]:
        """List active articles, newest first, optionally filtered. Returns (items, total_count)."""
        conditions = [Article.deleted_at.is_(None)]  # type: ignore[union-attr]
        if category_id is not None:
            conditions.append(Article.category_id == category_id)
        if subcategory_id is not None:
            conditions.append(Article.subcategory_id == subcategory_id)

        statement = (
            select(Article)
            .where(*conditions)
            .order_by(Article.id.desc())  # type: ignore[union-attr]
            .offset(skip)
            .limit(limit)
        )
        result = await self.session.execute(statement)
        items = list(result.scalars().all())

        count_statement = select(func.count()).select_from(Article).where(*conditions)
        total = (await self.session.execute(count_statement)).scalar() or 0

        return items, total

    async def get_article(self, article_id: int) -> Article:
        article = await self.session.get(Article, article_id)
        if article is None or article.deleted_at is not None:
            raise ArticleNotFound()
        return article

    async def _check_placement(self, category_id: int, subcategory_id: int) -> None:
        """Both must be active and the subcategory must belong to the category."""
        category = await self.session.get(Category, category_id)
        if category is None or category.deleted_at is not None:
            raise InvalidArticleCategory(f"Category {category_id} does not exist")

        subcategory = await self.session.get(Subcategory, subcategory_id)
        if subcategory is None or subcategory.deleted_at is not None:
            raise InvalidArticleCategory(f"Subcategory {subcategory_id} does not exist")
        if subcategory.category_id != category_id:
            raise InvalidArticleCategory(f"Subcategory {subcategory_id} does not belong to category {category_id}")

    async def create_article(self, **fields: Any) -> Article:
        await self._check_placement(fields["category_id"], fields["subcategory_id"])

        article = Article(**fields)
        self.session.add(article)
        await self.session.commit()

        logger.info("Created article", article_id=article.id, category_id=article.category_id)
        return article

    async def update_article(self, article_id: int, **fields: Any) -> Article:
        article = await self.get_article(article_id)
        await self._check_placement(
            fields.get("category_id", article.category_id),
            fields.get("subcategory_id", article.subcategory_id),
        )

        for key, value in fields.items():
            setattr(article, key, value)
        article.updated_at = utc_now()
        await self.session.commit()

        logger.info("Updated article", article_id=article_id, fields=sorted(fields))
        return article

    async def delete_article(self, article_id: int) -> None:
        article = await self.get_article(article_id)
        article.deleted_at = utc_now()
        await self.session.commit()

        logger.info("Deleted article", article_id=article_id)
