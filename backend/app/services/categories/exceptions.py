"""Category domain exceptions."""

from app.services.exceptions import ConflictError, NotFoundError


class CategoryNotFound(NotFoundError):
    """Category not found."""

    pass


class CategoryAlreadyExists(ConflictError):
    """Another active category already uses this name."""

    pass


class SubcategoryNotFound(NotFoundError):
    """Subcategory not found."""

    pass


class SubcategoryAlreadyExists(ConflictError):
    """The category already has a subcategory with this name."""

    pass
