"""Article domain exceptions."""

from app.services.exceptions import NotFoundError, ValidationError


class ArticleNotFound(NotFoundError):
    """Article not found."""

    pass


class InvalidArticleCategory(ValidationError):
    """The article cannot be filed under the given category and subcategory."""

    pass
