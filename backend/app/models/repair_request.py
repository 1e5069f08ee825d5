"""Repair request database model."""

from datetime import date, datetime
from decimal import Decimal
from typing import Any

from sqlalchemy import Column, DateTime, Enum, Numeric, event, inspect
from sqlmodel import Field, SQLModel

from app.models.enums import RepairStatus
from app.models.exceptions import MissingReceiptNumber, ReceiptNumberImmutable
from app.utils.datetime_utils import utc_now


class RepairRequest(SQLModel, table=True):
    """Device handed in by a customer for repair."""

    __tablename__ = "repair_requests"

    id: int | None = Field(default=None, primary_key=True)

    # "RR-000000000001", assigned once before the first INSERT
    receipt_number: str = Field(max_length=32, unique=True, index=True)

    customer_name: str
    customer_phone: str
    customer_email: str

    article_name: str
    article_type: str
    article_brand: str
    article_model: str
    article_serialnumber: str | None = None
    article_accesories: str | None = None
    article_problem: str

    repair_status: RepairStatus = Field(
        default=RepairStatus.PENDING,
        sa_column=Column(
            Enum(
                RepairStatus,
                values_callable=lambda e: [x.value for x in e],
                name="repairstatus",
                native_enum=False,
                length=32,
            ),
            nullable=False,
        ),
    )
    repair_details: str | None = None
    repair_price: Decimal | None = Field(default=None, sa_column=Column(Numeric(10, 2), nullable=True))
    received_at: date
    repaired_at: date | None = None

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime(timezone=True), nullable=False))
    updated_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime(timezone=True), nullable=False))
    deleted_at: datetime | None = Field(default=None, sa_column=Column(DateTime(timezone=True), nullable=True))


@event.listens_for(RepairRequest, "before_insert")
def _require_receipt_number(mapper: Any, connection: Any, target: RepairRequest) -> None:
    if not target.receipt_number:
        raise MissingReceiptNumber("RepairRequest cannot be inserted without a receipt number")


@event.listens_for(RepairRequest, "before_update")
def _freeze_receipt_number(mapper: Any, connection: Any, target: RepairRequest) -> None:
    history = inspect(target).attrs.receipt_number.history
    if history.deleted and history.deleted[0]:
        raise ReceiptNumberImmutable(
            f"Receipt number {history.deleted[0]} cannot be changed to {target.receipt_number}"
        )
