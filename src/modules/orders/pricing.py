"""Order total calculators.

Both helpers take a positive subtotal and return the discounted total
rounded to cents (half-up).  ``CalculateTotalDTO`` checks the inputs at
the API boundary; the guards below keep direct callers honest.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from shared.domain.exceptions import ValidationError

CENTS = Decimal("0.01")
HUNDRED = Decimal("100")


def _check_subtotal(subtotal: Decimal) -> None:
    if subtotal <= 0:
        raise ValidationError("Subtotal must be greater than zero.")


def calculate_total(
    subtotal: Decimal, discount_percent: Optional[Decimal] = None
) -> Decimal:
    """Apply a percentage discount (0 to 100, default 0)."""
    _check_subtotal(subtotal)
    percent = Decimal("0") if discount_percent is None else discount_percent
    if not Decimal("0") <= percent <= HUNDRED:
        raise ValidationError("Discount percentage must be between 0 and 100.")

    total = subtotal - subtotal * percent / HUNDRED
    return total.quantize(CENTS, rounding=ROUND_HALF_UP)


def calculate_total_with_fixed_discount(
    subtotal: Decimal, discount: Optional[Decimal] = None
) -> Decimal:
    """Subtract a fixed discount that cannot exceed the subtotal."""
    _check_subtotal(subtotal)
    value = Decimal("0") if discount is None else discount
    if value < 0:
        raise ValidationError("Discount cannot be negative.")
    if value > subtotal:
        raise ValidationError("Discount cannot be greater than the subtotal.")
    return (subtotal - value).quantize(CENTS, rounding=ROUND_HALF_UP)
