"""Unit tests for the domain-aware DRF exception handler."""

from __future__ import annotations

import pytest
from pydantic import ValidationError as PydanticValidationError
from rest_framework import exceptions

from modules.core.exception_handler import (
    DomainExceptionHandler,
    pydantic_errors_to_detail,
)
from modules.customers.dtos import CreateCustomerDTO
from modules.customers.exceptions import CustomerAlreadyExists, CustomerNotFound
from modules.orders.dtos import CalculateTotalDTO, CreateOrderDTO

pytestmark = pytest.mark.unit


def _handler(exc: Exception) -> DomainExceptionHandler:
    return DomainExceptionHandler(exc, {"view": None, "request": None})


class TestConvertKnownExceptions:
    def test_domain_validation_error_becomes_400(self):
        exc = CustomerAlreadyExists("Email already registered.")

        converted = _handler(exc).convert_known_exceptions(exc)

        assert isinstance(converted, exceptions.ValidationError)
        assert converted.status_code == 400
        assert converted.detail[0] == "Email already registered."
        assert converted.detail[0].code == "duplicate_email"

    def test_not_found_becomes_404(self):
        exc = CustomerNotFound("Customer 7 not found.")

        converted = _handler(exc).convert_known_exceptions(exc)

        assert isinstance(converted, exceptions.NotFound)
        assert converted.detail == "Customer 7 not found."
        assert converted.detail.code == "not_found"

    def test_pydantic_error_becomes_field_errors(self):
        with pytest.raises(PydanticValidationError) as exc_info:
            CreateOrderDTO(customer_id="abc", total_amount="10")

        converted = _handler(exc_info.value).convert_known_exceptions(exc_info.value)

        assert isinstance(converted, exceptions.ValidationError)
        assert "customer_id" in converted.detail


class TestPydanticErrorsToDetail:
    def test_model_level_error_uses_non_field_key(self):
        with pytest.raises(PydanticValidationError) as exc_info:
            CalculateTotalDTO(subtotal="10", discount_percent="5", discount_amount="1")

        detail = pydantic_errors_to_detail(exc_info.value)

        assert list(detail) == ["non_field_errors"]
        assert detail["non_field_errors"] == [
            "Provide either discount_percent or discount_amount, not both."
        ]

    def test_field_validator_message_kept_verbatim(self):
        with pytest.raises(PydanticValidationError) as exc_info:
            CreateCustomerDTO(name="   ", email="ana@example.com")

        assert pydantic_errors_to_detail(exc_info.value) == {
            "name": ["This field may not be blank."]
        }

    def test_non_object_payload_uses_non_field_key(self):
        with pytest.raises(PydanticValidationError) as exc_info:
            CreateOrderDTO.model_validate([1, 2])

        assert list(pydantic_errors_to_detail(exc_info.value)) == ["non_field_errors"]
