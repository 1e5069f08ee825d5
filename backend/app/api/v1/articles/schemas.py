"""API schemas for article endpoints."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field, field_serializer

from app.models.article import Article
from app.utils.datetime_utils import to_api_timezone


class ArticleCreate(BaseModel):
    """Payload for creating or replacing an article."""

    name: str = Field(min_length=3)
    description: str = Field(min_length=10, max_length=255)
    price: Decimal = Field(ge=0, max_digits=10, decimal_places=2)
    category_id: int
    subcategory_id: int


ArticleUpdate = ArticleCreate


class ArticleResponse(BaseModel):
    id: int
    category_id: int
    subcategory_id: int
    name: str
    description: str
    price: Decimal
    created_at: datetime
    updated_at: datetime

    @field_serializer("created_at", "updated_at")
    def serialize_timestamps(self, dt: datetime) -> str:
        """Serialize datetime to API timezone."""
        localized_dt = to_api_timezone(dt)
        assert localized_dt is not None
        return localized_dt.isoformat()

    @classmethod
    def from_model(cls, article: Article) -> "ArticleResponse":
        return cls.model_validate(article, from_attributes=True)


class ArticleListResponse(BaseModel):
    articles: list[ArticleResponse]
    total: int
