"""Product service layer (Use Cases).

Orchestrates business logic for products, delegating persistence to the
injected ``IProductRepository`` and restaurant look-ups to
``IRestaurantRepository``.

Business rules enforced here:
- The owning restaurant must exist and be active at creation time.
- New products are always available.
- Generic updates only touch name and category.
- Availability toggles reject a product already in the target state.
- Listing or counting by restaurant requires the restaurant to exist.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

import structlog
from django.db import transaction

from modules.products.exceptions import (
    InactiveRestaurant,
    ProductAvailabilityUnchanged,
    ProductNotFound,
)
from modules.products.models import Product
from modules.restaurants.exceptions import RestaurantNotFound

if TYPE_CHECKING:
    from modules.products.dtos import CreateProductDTO, UpdateProductDTO
    from modules.products.repositories.interfaces import IProductRepository
    from modules.restaurants.models import Restaurant
    from modules.restaurants.repositories.interfaces import IRestaurantRepository

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for Product use-cases."""

    def __init__(
        self,
        repository: IProductRepository,
        restaurant_repository: IRestaurantRepository,
    ) -> None:
        self._repo = repository
        self._restaurant_repo = restaurant_repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_product(self, dto: CreateProductDTO) -> Product:
        """Register a product for an active restaurant.

        Raises:
            RestaurantNotFound: the restaurant does not exist.
            InactiveRestaurant: the restaurant is inactive.
        """
        restaurant_id = dto.restaurant_id
        log = logger.bind(restaurant_id=restaurant_id)

        restaurant = self._get_restaurant(restaurant_id)
        if not restaurant.is_active:
            log.warning("product.inactive_restaurant")
            raise InactiveRestaurant("Cannot register products for inactive restaurant.")

        product = self._repo.create(
            Product(
                name=dto.name,
                category=dto.category,
                is_available=True,
                restaurant=restaurant,
            )
        )
        log.info("product.created", product_id=product.id)
        return product

    @transaction.atomic
    def update_product(self, id: int, dto: UpdateProductDTO) -> Product:
        product = self._get_or_raise(id)

        if dto.name is not None:
            product.name = dto.name
        if dto.category is not None:
            product.category = dto.category

        product = self._repo.save(product)
        logger.info("product.updated", product_id=id)
        return product

    @transaction.atomic
    def activate_product(self, id: int) -> Product:
        """Mark a product as available."""
        return self._set_available(id, True)

    @transaction.atomic
    def deactivate_product(self, id: int) -> Product:
        """Mark a product as unavailable."""
        return self._set_available(id, False)

    @transaction.atomic
    def delete_product(self, id: int) -> None:
        product = self._get_or_raise(id)
        self._repo.delete(product)
        logger.info("product.deleted", product_id=id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_product(self, id: int) -> Product:
        return self._get_or_raise(id)

    def is_product_available(self, id: int) -> bool:
        return self._get_or_raise(id).is_available

    def list_products_by_restaurant(
        self, restaurant_id: int, available: Optional[bool] = None
    ) -> List[Product]:
        """Products of a restaurant, optionally filtered by availability."""
        self._get_restaurant(restaurant_id)
        if available is None:
            return self._repo.list_by_restaurant(restaurant_id)
        return self._repo.list_by_restaurant_and_availability(restaurant_id, available)

    def list_products_by_restaurant_and_availability(
        self, restaurant_id: int, available: bool
    ) -> List[Product]:
        return self.list_products_by_restaurant(restaurant_id, available)

    def list_products_by_restaurant_and_category(
        self, restaurant_id: int, category: str, available: bool = True
    ) -> List[Product]:
        self._get_restaurant(restaurant_id)
        return self._repo.list_by_restaurant_category_and_availability(
            restaurant_id, category, available
        )

    def count_available_products(self, restaurant_id: int) -> int:
        self._get_restaurant(restaurant_id)
        return self._repo.count_by_restaurant_and_availability(restaurant_id, True)

    def count_unavailable_products(self, restaurant_id: int) -> int:
        self._get_restaurant(restaurant_id)
        return self._repo.count_by_restaurant_and_availability(restaurant_id, False)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get_or_raise(self, id: int) -> Product:
        product = self._repo.get_by_id(id)
        if not product:
            raise ProductNotFound(f"Product {id} not found.")
        return product

    def _get_restaurant(self, restaurant_id: int) -> Restaurant:
        restaurant = self._restaurant_repo.get_by_id(restaurant_id)
        if not restaurant:
            raise RestaurantNotFound(f"Restaurant {restaurant_id} not found.")
        return restaurant

    def _set_available(self, id: int, available: bool) -> Product:
        product = self._get_or_raise(id)
        log = logger.bind(product_id=id, available=available)
        if product.is_available == available:
            log.warning("product.availability_unchanged")
            state = "available" if available else "unavailable"
            raise ProductAvailabilityUnchanged(f"Product is already {state}.")

        product.is_available = available
        product = self._repo.save(product)
        log.info("product.availability_changed")
        return product
