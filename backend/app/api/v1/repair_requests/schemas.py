"""API schemas for repair request endpoints."""

from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, EmailStr, Field, field_serializer

from app.models.enums import RepairStatus
from app.models.repair_request import RepairRequest
from app.utils.datetime_utils import to_api_timezone

# =============================================================================
# Request Schemas
# =============================================================================


class RepairRequestCreate(BaseModel):
    """Payload for creating a repair request. The receipt number is assigned by the server."""

    customer_name: str = Field(min_length=3)
    customer_phone: str = Field(min_length=8)
    customer_email: EmailStr
    article_name: str = Field(min_length=3)
    article_type: str = Field(min_length=3)
    article_brand: str = Field(min_length=2)
    article_model: str = Field(min_length=2)
    article_serialnumber: str | None = Field(default=None, min_length=6)
    article_accesories: str | None = Field(default=None, min_length=3)
    article_problem: str = Field(min_length=3)
    repair_status: RepairStatus = RepairStatus.PENDING
    repair_details: str | None = Field(default=None, min_length=3)
    repair_price: Decimal | None = Field(default=None, ge=0, max_digits=10, decimal_places=2)
    received_at: date
    repaired_at: date | None = None


class RepairRequestUpdate(BaseModel):
    """Payload for updating a repair request. Customer and article identity are fixed."""

    article_serialnumber: str | None = Field(default=None, min_length=6)
    article_accesories: str | None = Field(default=None, min_length=3)
    repair_status: RepairStatus
    repair_details: str | None = Field(default=None, min_length=3)
    repair_price: Decimal | None = Field(default=None, ge=0, max_digits=10, decimal_places=2)
    repaired_at: date | None = None


# =============================================================================
# Response Schemas
# =============================================================================


class RepairRequestResponse(BaseModel):
    """Repair request response schema."""

    receipt_number: str
    customer_name: str
    customer_phone: str
    customer_email: str
    article_name: str
    article_type: str
    article_brand: str
    article_model: str
    article_serialnumber: str | None
    article_accesories: str | None
    article_problem: str
    repair_status: RepairStatus
    repair_details: str | None
    repair_price: Decimal | None
    received_at: date
    repaired_at: date | None
    created_at: datetime
    updated_at: datetime

    @field_serializer("created_at", "updated_at")
    def serialize_timestamps(self, dt: datetime) -> str:
        """Serialize datetime to API timezone."""
        localized_dt = to_api_timezone(dt)
        assert localized_dt is not None
        return localized_dt.isoformat()

    @classmethod
    def from_model(cls, repair_request: RepairRequest) -> "RepairRequestResponse":
        """Create response from RepairRequest model."""
        return cls.model_validate(repair_request, from_attributes=True)


class RepairRequestListResponse(BaseModel):
    """Paginated repair request list."""

    repair_requests: list[RepairRequestResponse]
    total: int
