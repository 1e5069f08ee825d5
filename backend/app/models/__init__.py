"""Database models."""

from sqlmodel import SQLModel

from app.models.article import Article
from app.models.category import Category, Subcategory
from app.models.enums import RepairStatus
from app.models.repair_request import RepairRequest
from app.models.support_request import SupportRequest

__all__ = [
    "SQLModel",
    "Article",
    "Category",
    "RepairRequest",
    "RepairStatus",
    "Subcategory",
    "SupportRequest",
]
