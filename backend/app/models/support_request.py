"""Support request model."""

from datetime import datetime

from sqlalchemy import Column, DateTime
from sqlmodel import Field, SQLModel

from app.utils.datetime_utils import utc_now


class SupportRequest(SQLModel, table=True):
    """On-site support visit requested by a customer."""

    __tablename__ = "support_requests"

    id: int | None = Field(default=None, primary_key=True)
    # When the visit should happen
    date: datetime = Field(sa_column=Column(DateTime(timezone=True), nullable=False))
    location: str
    detail: str

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime(timezone=True), nullable=False))
    updated_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime(timezone=True), nullable=False))
    deleted_at: datetime | None = Field(default=None, sa_column=Column(DateTime(timezone=True), nullable=True))
