"""Restaurant service layer (Use Cases).

Business rules enforced here:
- Restaurant names are unique.
- New restaurants are always active.
- Activate/deactivate reject a restaurant already in the target state.
- A restaurant with products cannot be deleted.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

import structlog
from django.db import transaction

from modules.restaurants.exceptions import (
    RestaurantAlreadyExists,
    RestaurantHasProducts,
    RestaurantNotFound,
    RestaurantStatusUnchanged,
)
from modules.restaurants.models import Restaurant

if TYPE_CHECKING:
    from modules.products.repositories.interfaces import IProductRepository
    from modules.restaurants.dtos import CreateRestaurantDTO, UpdateRestaurantDTO
    from modules.restaurants.repositories.interfaces import IRestaurantRepository

logger = structlog.get_logger(__name__)


class RestaurantService:
    """Application service for Restaurant use-cases."""

    def __init__(
        self,
        repository: IRestaurantRepository,
        product_repository: IProductRepository,
    ) -> None:
        self._repo = repository
        self._product_repo = product_repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_restaurant(self, dto: CreateRestaurantDTO) -> Restaurant:
        """Create a new, active restaurant.

        Raises:
            RestaurantAlreadyExists: name already registered.
        """
        name = dto.name
        log = logger.bind(restaurant_name=name)

        if self._repo.get_by_name(name):
            log.warning("restaurant.duplicate_name")
            raise RestaurantAlreadyExists("A restaurant with this name already exists.")

        restaurant = self._repo.create(
            Restaurant(
                name=name, category=dto.category, rating=dto.rating, is_active=True
            )
        )
        log.info("restaurant.created", restaurant_id=restaurant.id)
        return restaurant

    @transaction.atomic
    def update_restaurant(self, id: int, dto: UpdateRestaurantDTO) -> Restaurant:
        """Apply the supplied fields to an existing restaurant.

        Raises:
            RestaurantNotFound: the restaurant does not exist.
            RestaurantAlreadyExists: the new name belongs to another restaurant.
        """
        restaurant = self._get_or_raise(id)
        log = logger.bind(restaurant_id=id)

        name = dto.name

        if name is not None and name != restaurant.name:
            existing = self._repo.get_by_name(name)
            if existing and existing.id != restaurant.id:
                log.warning("restaurant.duplicate_name")
                raise RestaurantAlreadyExists(
                    "A restaurant with this name already exists."
                )

        if name is not None:
            restaurant.name = name
        if dto.category is not None:
            restaurant.category = dto.category
        if dto.rating is not None:
            restaurant.rating = dto.rating

        restaurant = self._repo.save(restaurant)
        log.info("restaurant.updated")
        return restaurant

    @transaction.atomic
    def activate_restaurant(self, id: int) -> Restaurant:
        return self._set_active(id, True)

    @transaction.atomic
    def deactivate_restaurant(self, id: int) -> Restaurant:
        return self._set_active(id, False)

    @transaction.atomic
    def delete_restaurant(self, id: int) -> None:
        """Permanently delete a restaurant that owns no products."""
        restaurant = self._get_or_raise(id)
        if self._product_repo.exists_for_restaurant(id):
            logger.warning("restaurant.delete_blocked", restaurant_id=id)
            raise RestaurantHasProducts(
                "Restaurant cannot be deleted while it has products."
            )
        self._repo.delete(restaurant)
        logger.info("restaurant.deleted", restaurant_id=id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_restaurant(self, id: int) -> Restaurant:
        return self._get_or_raise(id)

    def get_restaurant_by_name(self, name: str) -> Restaurant:
        restaurant = self._repo.get_by_name(name)
        if not restaurant:
            raise RestaurantNotFound(f"Restaurant '{name}' not found.")
        return restaurant

    def search_restaurants_by_name(self, fragment: str) -> List[Restaurant]:
        return self._repo.search_by_name(fragment)

    def list_restaurants_by_category(self, category: str) -> List[Restaurant]:
        return self._repo.list_active_by_category(category)

    def list_restaurants(self) -> List[Restaurant]:
        return self._repo.list_all()

    def list_active_restaurants(self) -> List[Restaurant]:
        return self._repo.list_active()

    def is_restaurant_active(self, id: int) -> bool:
        return self._get_or_raise(id).is_active

    def count_active_restaurants_by_category(self, category: str) -> int:
        return self._repo.count_active_by_category(category)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get_or_raise(self, id: int) -> Restaurant:
        restaurant = self._repo.get_by_id(id)
        if not restaurant:
            raise RestaurantNotFound(f"Restaurant {id} not found.")
        return restaurant

    def _set_active(self, id: int, active: bool) -> Restaurant:
        restaurant = self._get_or_raise(id)
        log = logger.bind(restaurant_id=id, active=active)
        if restaurant.is_active == active:
            log.warning("restaurant.status_unchanged")
            state = "active" if active else "inactive"
            raise RestaurantStatusUnchanged(f"Restaurant is already {state}.")

        restaurant.is_active = active
        restaurant = self._repo.save(restaurant)
        log.info("restaurant.activated" if active else "restaurant.deactivated")
        return restaurant
