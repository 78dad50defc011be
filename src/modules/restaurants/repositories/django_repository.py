"""Django ORM implementation of the Restaurant repository."""

from __future__ import annotations

from typing import List, Optional

import structlog
from django.core.exceptions import ValidationError

from modules.restaurants.models import Restaurant
from modules.restaurants.repositories.interfaces import IRestaurantRepository

logger = structlog.get_logger(__name__)

RANKING = ("-rating", "name", "id")


class RestaurantDjangoRepository(IRestaurantRepository):
    """Concrete Restaurant repository backed by Django ORM."""

    def get_by_id(self, id: int) -> Optional[Restaurant]:
        try:
            return Restaurant.objects.filter(id=id).first()
        except (ValueError, TypeError, ValidationError):
            return None

    def create(self, entity: Restaurant) -> Restaurant:
        entity.save(force_insert=True)
        logger.debug("restaurant.inserted", restaurant_id=entity.id)
        return entity

    def save(self, entity: Restaurant) -> Restaurant:
        entity.save()
        return entity

    def delete(self, entity: Restaurant) -> None:
        restaurant_id = entity.id
        entity.delete()
        logger.debug("restaurant.deleted_row", restaurant_id=restaurant_id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_by_name(self, name: str) -> Optional[Restaurant]:
        return Restaurant.objects.filter(name=name).first()

    def search_by_name(self, fragment: str) -> List[Restaurant]:
        return list(
            Restaurant.objects.filter(name__icontains=fragment).order_by("name", "id")
        )

    def list_all(self) -> List[Restaurant]:
        return list(Restaurant.objects.order_by("name", "id"))

    def list_active(self) -> List[Restaurant]:
        return list(Restaurant.objects.filter(is_active=True).order_by(*RANKING))

    def list_active_by_category(self, category: str) -> List[Restaurant]:
        return list(
            Restaurant.objects.filter(category=category, is_active=True).order_by(*RANKING)
        )

    def count_active_by_category(self, category: str) -> int:
        return Restaurant.objects.filter(category=category, is_active=True).count()
