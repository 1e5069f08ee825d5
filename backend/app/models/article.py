"""Catalog article model."""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import Column, DateTime, ForeignKey, Integer, Numeric
from sqlmodel import Field, SQLModel

from app.utils.datetime_utils import utc_now


class Article(SQLModel, table=True):
    """Product offered by the shop, filed under a category and one of its subcategories."""

    __tablename__ = "articles"

    id: int | None = Field(default=None, primary_key=True)
    category_id: int = Field(
        sa_column=Column(Integer, ForeignKey("categories.id", ondelete="CASCADE"), nullable=False, index=True)
    )
    subcategory_id: int = Field(
        sa_column=Column(Integer, ForeignKey("subcategories.id", ondelete="CASCADE"), nullable=False, index=True)
    )
    name: str
    description: str
    price: Decimal = Field(sa_column=Column(Numeric(10, 2), nullable=False))

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime(timezone=True), nullable=False))
    updated_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime(timezone=True), nullable=False))
    deleted_at: datetime | None = Field(default=None, sa_column=Column(DateTime(timezone=True), nullable=True))
