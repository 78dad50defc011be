"""Product domain exceptions."""

from __future__ import annotations

from shared.domain.exceptions import NotFoundError, ValidationError


class ProductNotFound(NotFoundError):
    """The requested product does not exist."""


class InactiveRestaurant(ValidationError):
    """Products cannot be registered for an inactive restaurant."""

    code = "inactive_restaurant"


class ProductAvailabilityUnchanged(ValidationError):
    """Availability toggle requested for a product already in that state."""

    code = "availability_unchanged"
