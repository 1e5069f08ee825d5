"""Articles API package."""

from app.api.v1.articles.routes import router

__all__ = ["router"]
