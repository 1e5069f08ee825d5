"""API schemas for support request endpoints."""

from datetime import datetime

from pydantic import BaseModel, Field, field_serializer, field_validator

from app.models.support_request import SupportRequest
from app.utils.datetime_utils import to_api_timezone, to_utc


class SupportRequestCreate(BaseModel):
    """Payload for a support visit. A `date` without offset is read as API-local time."""

    date: datetime
    location: str = Field(min_length=10)
    detail: str = Field(min_length=10)

    @field_validator("date")
    @classmethod
    def normalize_date(cls, value: datetime) -> datetime:
        return to_utc(value)


class SupportRequestUpdate(BaseModel):
    date: datetime | None = None
    location: str | None = Field(default=None, min_length=10)
    detail: str | None = Field(default=None, min_length=10)

    @field_validator("date", "location", "detail")
    @classmethod
    def reject_null(cls, value: object) -> object:
        if value is None:
            raise ValueError("may be omitted but not null")
        return value

    @field_validator("date")
    @classmethod
    def normalize_date(cls, value: datetime) -> datetime:
        return to_utc(value)


class SupportRequestResponse(BaseModel):
    id: int
    date: datetime
    location: str
    detail: str
    created_at: datetime
    updated_at: datetime

    @field_serializer("date", "created_at", "updated_at")
    def serialize_timestamps(self, dt: datetime) -> str:
        """Serialize datetime to API timezone."""
        localized_dt = to_api_timezone(dt)
        assert localized_dt is not None
        return localized_dt.isoformat()

    @classmethod
    def from_model(cls, support_request: SupportRequest) -> "SupportRequestResponse":
        return cls.model_validate(support_request, from_attributes=True)


class SupportRequestListResponse(BaseModel):
    support_requests: list[SupportRequestResponse]
    total: int
