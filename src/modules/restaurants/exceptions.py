"""Restaurant domain exceptions."""

from __future__ import annotations

from shared.domain.exceptions import NotFoundError, ValidationError


class RestaurantNotFound(NotFoundError):
    """The requested restaurant does not exist."""


class RestaurantAlreadyExists(ValidationError):
    """Another restaurant already uses this name."""

    code = "duplicate_name"


class RestaurantStatusUnchanged(ValidationError):
    """Activate/deactivate requested for a restaurant already in that state."""

    code = "status_unchanged"


class RestaurantHasProducts(ValidationError):
    """The restaurant cannot be deleted while products reference it."""

    code = "restaurant_has_products"
