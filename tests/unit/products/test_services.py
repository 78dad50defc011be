"""Unit tests for ProductService (mocked repositories)."""

from __future__ import annotations

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from modules.products.dtos import CreateProductDTO, UpdateProductDTO
from modules.products.exceptions import (
    InactiveRestaurant,
    ProductAvailabilityUnchanged,
    ProductNotFound,
)
from modules.products.models import Product
from modules.products.services import ProductService
from modules.restaurants.exceptions import RestaurantNotFound
from modules.restaurants.models import Restaurant

pytestmark = pytest.mark.unit


@pytest.fixture()
def mock_repo():
    repo = MagicMock()
    repo.create.side_effect = lambda p: p
    repo.save.side_effect = lambda p: p
    return repo


@pytest.fixture()
def mock_restaurant_repo():
    repo = MagicMock()
    repo.get_by_id.return_value = _make_restaurant()
    return repo


@pytest.fixture()
def service(mock_repo, mock_restaurant_repo):
    return ProductService(
        repository=mock_repo, restaurant_repository=mock_restaurant_repo
    )


def _make_restaurant(**overrides) -> Restaurant:
    defaults = {
        "id": 1,
        "name": "Pizzaria do João",
        "category": "Italiana",
        "rating": Decimal("4.50"),
        "is_active": True,
    }
    defaults.update(overrides)
    return Restaurant(**defaults)


def _make_product(**overrides) -> Product:
    defaults = {
        "id": 1,
        "name": "Pizza Margherita",
        "category": "Pizzas",
        "is_available": True,
        "restaurant": _make_restaurant(),
    }
    defaults.update(overrides)
    return Product(**defaults)


# ===========================================================================
# create_product
# ===========================================================================


class TestCreateProduct:
    def test_success_forces_available(self, service, mock_repo):
        product = service.create_product(
            CreateProductDTO(name="Pizza Margherita", category="Pizzas", restaurant_id=1)
        )

        assert product.is_available is True
        assert product.restaurant_id == 1
        mock_repo.create.assert_called_once()

    def test_inactive_restaurant(self, service, mock_repo, mock_restaurant_repo):
        mock_restaurant_repo.get_by_id.return_value = _make_restaurant(is_active=False)

        with pytest.raises(
            InactiveRestaurant, match="Cannot register products for inactive restaurant."
        ):
            service.create_product(
                CreateProductDTO(name="Pizza Calabresa", category="Pizzas", restaurant_id=1)
            )
        mock_repo.create.assert_not_called()

    def test_missing_restaurant(self, service, mock_repo, mock_restaurant_repo):
        mock_restaurant_repo.get_by_id.return_value = None

        with pytest.raises(RestaurantNotFound):
            service.create_product(
                CreateProductDTO(name="Pizza Calabresa", category="Pizzas", restaurant_id=9)
            )
        mock_repo.create.assert_not_called()


# ===========================================================================
# update / availability
# ===========================================================================


class TestUpdateProduct:
    def test_updates_name_and_category_only(self, service, mock_repo):
        product = _make_product(is_available=False)
        mock_repo.get_by_id.return_value = product

        updated = service.update_product(
            1, UpdateProductDTO(name="Pizza Napolitana", category="Especiais")
        )

        assert updated.name == "Pizza Napolitana"
        assert updated.category == "Especiais"
        assert updated.is_available is False

    def test_not_found(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None

        with pytest.raises(ProductNotFound):
            service.update_product(3, UpdateProductDTO(name="Qualquer"))


class TestAvailability:
    def test_deactivate(self, service, mock_repo):
        mock_repo.get_by_id.return_value = _make_product()

        assert service.deactivate_product(1).is_available is False

    def test_activate_unavailable(self, service, mock_repo):
        mock_repo.get_by_id.return_value = _make_product(is_available=False)

        assert service.activate_product(1).is_available is True

    def test_deactivate_already_unavailable(self, service, mock_repo):
        mock_repo.get_by_id.return_value = _make_product(is_available=False)

        with pytest.raises(ProductAvailabilityUnchanged, match="already unavailable"):
            service.deactivate_product(1)
        mock_repo.save.assert_not_called()

    def test_activate_already_available(self, service, mock_repo):
        product = _make_product()
        mock_repo.get_by_id.return_value = product

        with pytest.raises(ProductAvailabilityUnchanged, match="already available"):
            service.activate_product(1)
        assert product.is_available is True
        mock_repo.save.assert_not_called()

    def test_is_product_available(self, service, mock_repo):
        mock_repo.get_by_id.return_value = _make_product()

        assert service.is_product_available(1) is True


# ===========================================================================
# Listings and counts
# ===========================================================================


class TestListings:
    def test_list_all_of_restaurant(self, service, mock_repo):
        service.list_products_by_restaurant(1)

        mock_repo.list_by_restaurant.assert_called_once_with(1)

    def test_list_filtered_by_availability(self, service, mock_repo):
        service.list_products_by_restaurant_and_availability(1, False)

        mock_repo.list_by_restaurant_and_availability.assert_called_once_with(1, False)

    def test_list_by_category_defaults_to_available(self, service, mock_repo):
        service.list_products_by_restaurant_and_category(1, "Pizzas")

        mock_repo.list_by_restaurant_category_and_availability.assert_called_once_with(
            1, "Pizzas", True
        )

    def test_listing_requires_restaurant(self, service, mock_restaurant_repo):
        mock_restaurant_repo.get_by_id.return_value = None

        with pytest.raises(RestaurantNotFound):
            service.list_products_by_restaurant(42)

    def test_counts(self, service, mock_repo):
        mock_repo.count_by_restaurant_and_availability.side_effect = (
            lambda rid, available: 3 if available else 1
        )

        assert service.count_available_products(1) == 3
        assert service.count_unavailable_products(1) == 1
