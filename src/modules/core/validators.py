"""Field types shared by the Pydantic DTOs.

Each alias bundles the constraints of one kind of field so the DTOs of
every module validate names, emails, ratings and money the same way.
Failures surface as ``pydantic.ValidationError`` and are rendered as
HTTP 400 by ``modules.core.exception_handler``.

Limits:
- names: 3 to 100 characters after trimming.
- categories: 3 to 50 characters after trimming.
- email: ``local@domain`` shape, at most 100 characters.
- rating: 0.0 to 5.0 inclusive, at most 2 decimal places.
- monetary values: 0.01 to 999999.99 inclusive, at most 2 decimal places.
- identifiers: strictly positive integers (booleans and numeric text rejected).
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Annotated, Any, Optional

from pydantic import BeforeValidator, Field, StringConstraints

from shared.domain.exceptions import ValidationError

EMAIL_PATTERN = r"^[A-Za-z0-9+_.-]+@(.+)$"

NAME_MIN_LENGTH = 3
NAME_MAX_LENGTH = 100
CATEGORY_MIN_LENGTH = 3
CATEGORY_MAX_LENGTH = 50
EMAIL_MAX_LENGTH = 100

MIN_RATING = Decimal("0.0")
MAX_RATING = Decimal("5.0")
MIN_MONETARY_VALUE = Decimal("0.01")
MAX_MONETARY_VALUE = Decimal("999999.99")


def reject_blank(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        raise ValueError("This field may not be blank.")
    return value


def coerce_number(value: Any) -> Any:
    """Reject booleans and read floats through their shortest text form."""
    if isinstance(value, bool):
        raise ValueError("A valid number is required.")
    if isinstance(value, float):
        return str(value)
    return value


Name = Annotated[
    str,
    StringConstraints(
        strip_whitespace=True, min_length=NAME_MIN_LENGTH, max_length=NAME_MAX_LENGTH
    ),
    BeforeValidator(reject_blank),
]

Category = Annotated[
    str,
    StringConstraints(
        strip_whitespace=True,
        min_length=CATEGORY_MIN_LENGTH,
        max_length=CATEGORY_MAX_LENGTH,
    ),
    BeforeValidator(reject_blank),
]

Email = Annotated[
    str,
    StringConstraints(
        strip_whitespace=True, max_length=EMAIL_MAX_LENGTH, pattern=EMAIL_PATTERN
    ),
    BeforeValidator(reject_blank),
]

Rating = Annotated[
    Decimal,
    Field(ge=MIN_RATING, le=MAX_RATING, decimal_places=2),
    BeforeValidator(coerce_number),
]

MonetaryValue = Annotated[
    Decimal,
    Field(ge=MIN_MONETARY_VALUE, le=MAX_MONETARY_VALUE, decimal_places=2),
    BeforeValidator(coerce_number),
]

Identifier = Annotated[int, Field(strict=True, gt=0)]


def validate_period(start: Optional[datetime], end: Optional[datetime]) -> None:
    """Both bounds present and ``start <= end``.

    Raises ``ValidationError`` rather than a pydantic error because the
    bounds arrive as service arguments, not through a DTO.
    """
    if start is None or end is None:
        raise ValidationError("Start and end dates are required.")
    if start > end:
        raise ValidationError("Start date must not be after end date.")
