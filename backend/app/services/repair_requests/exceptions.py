"""Repair request domain exceptions."""

from app.services.exceptions import NotFoundError, ServiceError, ValidationError


class RepairRequestNotFound(NotFoundError):
    """Repair request not found."""

    pass


class RepairRequestCreationFailed(ServiceError):
    """Repair request could not be created; nothing was persisted."""

    pass


class FieldNotUpdatable(ValidationError):
    """Field cannot be changed after creation."""

    pass
