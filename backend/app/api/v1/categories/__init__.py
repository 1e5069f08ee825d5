"""Categories and subcategories API package."""

from app.api.v1.categories.routes import router

__all__ = ["router"]
