"""Support request domain exceptions."""

from app.services.exceptions import NotFoundError


class SupportRequestNotFound(NotFoundError):
    """Support request not found."""

    pass
