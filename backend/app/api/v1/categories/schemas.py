"""API schemas for category and subcategory endpoints."""

from datetime import datetime

from pydantic import BaseModel, Field, field_serializer, field_validator

from app.models.category import Category, Subcategory
from app.utils.datetime_utils import to_api_timezone

# =============================================================================
# Request Schemas
# =============================================================================


class CategoryCreate(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    description: str | None = Field(default=None, max_length=255)


class CategoryUpdate(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    description: str | None = Field(default=None, max_length=255)


class SubcategoryCreate(BaseModel):
    category_id: int
    name: str = Field(min_length=1, max_length=255)
    description: str | None = Field(default=None, max_length=1000)


class SubcategoryUpdate(BaseModel):
    """Partial update; omitted fields keep their value."""

    category_id: int | None = None
    name: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = Field(default=None, max_length=1000)

    @field_validator("category_id", "name")
    @classmethod
    def reject_null(cls, value: object) -> object:
        if value is None:
            raise ValueError("may be omitted but not null")
        return value


# =============================================================================
# Response Schemas
# =============================================================================


class CategoryResponse(BaseModel):
    id: int
    name: str
    description: str | None
    created_at: datetime
    updated_at: datetime

    @field_serializer("created_at", "updated_at")
    def serialize_timestamps(self, dt: datetime) -> str:
        """Serialize datetime to API timezone."""
        localized_dt = to_api_timezone(dt)
        assert localized_dt is not None
        return localized_dt.isoformat()

    @classmethod
    def from_model(cls, category: Category) -> "CategoryResponse":
        return cls.model_validate(category, from_attributes=True)


class CategoryListResponse(BaseModel):
    categories: list[CategoryResponse]
    total: int


class SubcategoryResponse(BaseModel):
    """Subcategory with its parent category embedded."""

    id: int
    name: str
    description: str | None
    category: CategoryResponse
    created_at: datetime
    updated_at: datetime

    @field_serializer("created_at", "updated_at")
    def serialize_timestamps(self, dt: datetime) -> str:
        """Serialize datetime to API timezone."""
        localized_dt = to_api_timezone(dt)
        assert localized_dt is not None
        return localized_dt.isoformat()

    @classmethod
    def from_model(cls, subcategory: Subcategory) -> "SubcategoryResponse":
        """Create response from a Subcategory loaded with its category."""
        return cls.model_validate(subcategory, from_attributes=True)


class SubcategoryListResponse(BaseModel):
    subcategories: list[SubcategoryResponse]
    total: int
