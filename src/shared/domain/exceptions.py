"""Base domain exceptions shared by every module.

Two families exist:

- ``ValidationError``: the request breaks a business rule (bad input,
  duplicate, illegal transition, inactive owner).  Rendered as HTTP 400.
- ``NotFoundError``: a referenced entity does not exist.  Rendered as
  HTTP 404.

Module-level exceptions subclass one of them so the API layer only has
to know these two kinds.
"""

from __future__ import annotations


class DomainError(Exception):
    """Root of the domain exception hierarchy."""

    code = "domain_error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(DomainError):
    """A business rule was violated."""

    code = "invalid"


class NotFoundError(DomainError):
    """The requested entity does not exist."""

    code = "not_found"
