"""Customer domain exceptions.

Raised by the Service Layer when business rules are violated.  They
subclass the shared ``ValidationError`` / ``NotFoundError`` so the API
exception handler can translate them without knowing this module.
"""

from __future__ import annotations

from shared.domain.exceptions import NotFoundError, ValidationError


class CustomerNotFound(NotFoundError):
    """The requested customer does not exist."""


class CustomerAlreadyExists(ValidationError):
    """Another customer already uses this email."""

    code = "duplicate_email"


class ActiveCustomerNotFound(ValidationError):
    """No *active* customer matches the given email."""

    code = "active_customer_not_found"


class CustomerStatusUnchanged(ValidationError):
    """Activate/deactivate requested for a customer already in that state."""

    code = "status_unchanged"


class CustomerHasOrders(ValidationError):
    """The customer cannot be deleted while orders reference it."""

    code = "customer_has_orders"
