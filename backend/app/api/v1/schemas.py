"""Schemas shared by all v1 endpoints."""

from pydantic import BaseModel


class StatusResponse(BaseModel):
    """Generic status response."""

    status: str
    message: str
