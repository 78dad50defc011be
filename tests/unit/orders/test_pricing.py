"""Unit tests for the order total calculators."""

from __future__ import annotations

from decimal import Decimal

import pytest

from modules.orders.pricing import calculate_total, calculate_total_with_fixed_discount
from shared.domain.exceptions import ValidationError

pytestmark = pytest.mark.unit


class TestCalculateTotal:
    def test_without_discount(self):
        assert calculate_total(Decimal("100")) == Decimal("100.00")

    def test_percentage_discount(self):
        assert calculate_total(Decimal("80.00"), Decimal("10")) == Decimal("72.00")

    def test_rounds_half_up_to_cents(self):
        # 10.05 * 0.5 = 5.025
        assert calculate_total(Decimal("10.05"), Decimal("50")) == Decimal("5.03")

    def test_full_discount(self):
        assert calculate_total(Decimal("25"), Decimal("100")) == Decimal("0.00")

    @pytest.mark.parametrize("percent", ["-1", "100.01"])
    def test_percent_out_of_range(self, percent):
        with pytest.raises(ValidationError, match="between 0 and 100"):
            calculate_total(Decimal("10"), Decimal(percent))

    @pytest.mark.parametrize("subtotal", ["0", "-5"])
    def test_subtotal_must_be_positive(self, subtotal):
        with pytest.raises(ValidationError, match="Subtotal must be greater than zero."):
            calculate_total(Decimal(subtotal))


class TestCalculateTotalWithFixedDiscount:
    def test_subtracts_discount(self):
        assert calculate_total_with_fixed_discount(
            Decimal("59.90"), Decimal("9.90")
        ) == Decimal("50.00")

    def test_discount_equal_to_subtotal(self):
        assert calculate_total_with_fixed_discount(
            Decimal("10"), Decimal("10")
        ) == Decimal("0.00")

    def test_no_discount(self):
        assert calculate_total_with_fixed_discount(Decimal("12.5")) == Decimal("12.50")

    def test_negative_discount(self):
        with pytest.raises(ValidationError, match="Discount cannot be negative."):
            calculate_total_with_fixed_discount(Decimal("10"), Decimal("-1"))

    def test_discount_greater_than_subtotal(self):
        with pytest.raises(ValidationError, match="greater than the subtotal"):
            calculate_total_with_fixed_discount(Decimal("10"), Decimal("10.01"))
