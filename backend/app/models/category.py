"""Catalog category and subcategory models."""

from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, Integer, UniqueConstraint
from sqlmodel import Field, Relationship, SQLModel

from app.utils.datetime_utils import utc_now


class Category(SQLModel, table=True):
    """Top-level catalog grouping, addressed by its name in the API."""

    __tablename__ = "categories"

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(max_length=255, index=True)
    description: str | None = Field(default=None, max_length=255)

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime(timezone=True), nullable=False))
    updated_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime(timezone=True), nullable=False))
    deleted_at: datetime | None = Field(default=None, sa_column=Column(DateTime(timezone=True), nullable=True))


SUBCATEGORY_NAME_CONSTRAINT = UniqueConstraint("category_id", "name", name="uq_subcategory_category_name")


class Subcategory(SQLModel, table=True):
    __tablename__ = "subcategories"
    __table_args__ = (SUBCATEGORY_NAME_CONSTRAINT,)

    id: int | None = Field(default=None, primary_key=True)
    category_id: int = Field(
        sa_column=Column(Integer, ForeignKey("categories.id", ondelete="CASCADE"), nullable=False, index=True)
    )
    name: str = Field(max_length=255)
    description: str | None = Field(default=None, max_length=1000)

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime(timezone=True), nullable=False))
    updated_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime(timezone=True), nullable=False))
    deleted_at: datetime | None = Field(default=None, sa_column=Column(DateTime(timezone=True), nullable=True))

    # Relationships
    category: Category = Relationship()
