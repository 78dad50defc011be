"""Django ORM implementation of the Product repository."""

from __future__ import annotations

from typing import List, Optional

import structlog
from django.core.exceptions import ValidationError

from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def get_by_id(self, id: int) -> Optional[Product]:
        try:
            return Product.objects.select_related("restaurant").filter(id=id).first()
        except (ValueError, TypeError, ValidationError):
            return None

    def create(self, entity: Product) -> Product:
        entity.save(force_insert=True)
        logger.debug("product.inserted", product_id=entity.id)
        return entity

    def save(self, entity: Product) -> Product:
        entity.save()
        return entity

    def delete(self, entity: Product) -> None:
        product_id = entity.id
        entity.delete()
        logger.debug("product.deleted_row", product_id=product_id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_by_restaurant(self, restaurant_id: int) -> List[Product]:
        return list(
            Product.objects.filter(restaurant_id=restaurant_id).order_by("name", "id")
        )

    def list_by_restaurant_and_availability(
        self, restaurant_id: int, available: bool
    ) -> List[Product]:
        return list(
            Product.objects.filter(
                restaurant_id=restaurant_id, is_available=available
            ).order_by("name", "id")
        )

    def list_by_restaurant_category_and_availability(
        self, restaurant_id: int, category: str, available: bool
    ) -> List[Product]:
        return list(
            Product.objects.filter(
                restaurant_id=restaurant_id,
                category=category,
                is_available=available,
            ).order_by("name", "id")
        )

    def count_by_restaurant_and_availability(
        self, restaurant_id: int, available: bool
    ) -> int:
        return Product.objects.filter(
            restaurant_id=restaurant_id, is_available=available
        ).count()

    def exists_for_restaurant(self, restaurant_id: int) -> bool:
        return Product.objects.filter(restaurant_id=restaurant_id).exists()
