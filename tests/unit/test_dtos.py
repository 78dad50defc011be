"""Unit tests for the Pydantic DTOs."""

from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from modules.customers.dtos import CreateCustomerDTO, UpdateCustomerDTO
from modules.orders.dtos import CalculateTotalDTO, CreateOrderDTO
from modules.products.dtos import CreateProductDTO, UpdateProductDTO
from modules.restaurants.dtos import CreateRestaurantDTO, UpdateRestaurantDTO

pytestmark = pytest.mark.unit


def _error_fields(exc_info) -> set:
    return {error["loc"][0] for error in exc_info.value.errors() if error["loc"]}


class TestCreateDTOs:
    def test_customer_fields_trimmed(self):
        dto = CreateCustomerDTO(name="  João Silva ", email=" joao@example.com ")

        assert dto.name == "João Silva"
        assert dto.email == "joao@example.com"

    @pytest.mark.parametrize(
        "payload,field",
        [
            ({"email": "joao@example.com"}, "name"),
            ({"name": "Jo", "email": "joao@example.com"}, "name"),
            ({"name": "João Silva"}, "email"),
            ({"name": "João Silva", "email": "not-an-email"}, "email"),
        ],
    )
    def test_customer_invalid_field(self, payload, field):
        with pytest.raises(ValidationError) as exc_info:
            CreateCustomerDTO.model_validate(payload)
        assert _error_fields(exc_info) == {field}

    def test_restaurant_requires_rating(self):
        with pytest.raises(ValidationError) as exc_info:
            CreateRestaurantDTO(name="Outro Lugar", category="Italiana")
        assert _error_fields(exc_info) == {"rating"}

    def test_restaurant_short_category(self):
        with pytest.raises(ValidationError) as exc_info:
            CreateRestaurantDTO(name="Outro Lugar", category="It", rating="3")
        assert _error_fields(exc_info) == {"category"}

    def test_product_requires_restaurant(self):
        with pytest.raises(ValidationError) as exc_info:
            CreateProductDTO(name="Pizza", category="Pizzas")
        assert _error_fields(exc_info) == {"restaurant_id"}

    @pytest.mark.parametrize("total", [None, "0", "1000000", "10.005"])
    def test_order_total_rejected(self, total):
        with pytest.raises(ValidationError) as exc_info:
            CreateOrderDTO(customer_id=1, total_amount=total)
        assert _error_fields(exc_info) == {"total_amount"}

    def test_non_object_payload_rejected(self):
        with pytest.raises(ValidationError):
            CreateOrderDTO.model_validate([1, 2])


class TestPatchDTOs:
    def test_omitted_fields_are_none(self):
        dto = UpdateCustomerDTO(name="Ana Souza")
        assert dto.email is None

    def test_frozen(self):
        dto = UpdateCustomerDTO(name="Ana Souza")
        with pytest.raises(ValidationError):
            dto.name = "Outra"

    def test_supplied_value_still_validated(self):
        with pytest.raises(ValidationError):
            UpdateRestaurantDTO(rating="5.5")

    def test_product_patch_ignores_restaurant_and_availability(self):
        dto = UpdateProductDTO.model_validate(
            {"name": "Pizza Napolitana", "restaurant_id": 9, "is_available": False}
        )

        assert dto.model_dump() == {"name": "Pizza Napolitana", "category": None}


class TestTypeCoercion:
    def test_decimal_from_number_and_text(self):
        assert CreateRestaurantDTO(
            name="Sushi Kenzo", category="Japonesa", rating=4.5
        ).rating == Decimal("4.5")
        assert CreateOrderDTO(
            customer_id=1, total_amount="59.90"
        ).total_amount == Decimal("59.90")

    def test_float_read_through_its_text_form(self):
        dto = CreateRestaurantDTO(name="Sushi Kenzo", category="Japonesa", rating=4.8)
        assert dto.rating == Decimal("4.8")

    @pytest.mark.parametrize("value", [True, "3", 0, -2, 1.0])
    def test_ids_must_be_positive_integers(self, value):
        with pytest.raises(ValidationError):
            CreateOrderDTO(customer_id=value, total_amount="10")
        with pytest.raises(ValidationError):
            CreateProductDTO(name="Pizza", category="Pizzas", restaurant_id=value)

    def test_bool_amount_rejected(self):
        with pytest.raises(ValidationError, match="valid number"):
            CreateOrderDTO(customer_id=1, total_amount=True)


class TestCalculateTotalDTO:
    def test_single_discount_kind(self):
        dto = CalculateTotalDTO(subtotal="100", discount_amount="10")
        assert dto.discount_percent is None

    def test_both_discounts_rejected(self):
        with pytest.raises(ValidationError, match="not both"):
            CalculateTotalDTO(subtotal="100", discount_percent="5", discount_amount="10")

    def test_discount_above_subtotal_rejected(self):
        with pytest.raises(ValidationError, match="greater than the subtotal"):
            CalculateTotalDTO(subtotal="10", discount_amount="20")

    @pytest.mark.parametrize(
        "payload",
        [
            {"subtotal": "0"},
            {"subtotal": "10", "discount_percent": "101"},
            {"subtotal": "10", "discount_amount": "-1"},
        ],
    )
    def test_out_of_range_values(self, payload):
        with pytest.raises(ValidationError):
            CalculateTotalDTO.model_validate(payload)
