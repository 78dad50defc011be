"""Order DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.  DTOs are
immutable (``frozen=True``).

- ``CreateOrderDTO``: customer reference and total amount.
- ``CalculateTotalDTO``: subtotal plus either a percentage or a fixed
  discount (never both).
"""

from __future__ import annotations

from decimal import Decimal
from typing import Annotated, Optional, Self

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, model_validator

from modules.core.validators import Identifier, MonetaryValue, coerce_number


class CreateOrderDTO(BaseModel):
    """Input for order creation; status is always ``PENDING``."""

    model_config = ConfigDict(frozen=True)

    customer_id: Identifier
    total_amount: MonetaryValue


class CalculateTotalDTO(BaseModel):
    """Validates:

    - ``subtotal`` is greater than zero.
    - ``discount_percent`` lies in [0, 100].
    - ``discount_amount`` is non-negative and not above the subtotal.
    """

    model_config = ConfigDict(frozen=True)

    subtotal: Annotated[Decimal, Field(gt=0), BeforeValidator(coerce_number)]
    discount_percent: Optional[
        Annotated[Decimal, Field(ge=0, le=100), BeforeValidator(coerce_number)]
    ] = None
    discount_amount: Optional[
        Annotated[Decimal, Field(ge=0), BeforeValidator(coerce_number)]
    ] = None

    @model_validator(mode="after")
    def single_discount_kind(self) -> Self:
        if self.discount_percent is not None and self.discount_amount is not None:
            raise ValueError(
                "Provide either discount_percent or discount_amount, not both."
            )
        if self.discount_amount is not None and self.discount_amount > self.subtotal:
            raise ValueError("Discount cannot be greater than the subtotal.")
        return self
