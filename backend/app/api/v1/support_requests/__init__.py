"""Support requests API package."""

from app.api.v1.support_requests.routes import router

__all__ = ["router"]
