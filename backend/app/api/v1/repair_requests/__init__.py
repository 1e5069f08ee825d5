"""Repair requests API package."""

from app.api.v1.repair_requests.routes import router

__all__ = ["router"]
