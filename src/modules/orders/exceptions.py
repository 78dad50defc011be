"""Order domain exceptions."""

from __future__ import annotations

from shared.domain.exceptions import NotFoundError, ValidationError


class OrderNotFound(NotFoundError):
    """The requested order does not exist."""


class InvalidOrderStatus(ValidationError):
    """The value is not one of the six order statuses."""

    code = "invalid_status"


class InvalidStatusTransition(ValidationError):
    """The transition is not in the lifecycle table."""

    code = "invalid_transition"


class InactiveCustomer(ValidationError):
    """The customer is inactive and cannot place orders."""

    code = "inactive_customer"
