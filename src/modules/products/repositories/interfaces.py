"""Product repository interface.

Every list method orders products by name.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, List

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for products."""

    @abstractmethod
    def list_by_restaurant(self, restaurant_id: int) -> List[Product]:
        """All products of a restaurant."""

    @abstractmethod
    def list_by_restaurant_and_availability(
        self, restaurant_id: int, available: bool
    ) -> List[Product]:
        """Products of a restaurant with the given availability."""

    @abstractmethod
    def list_by_restaurant_category_and_availability(
        self, restaurant_id: int, category: str, available: bool
    ) -> List[Product]:
        """Products of a restaurant in a category with the given availability."""

    @abstractmethod
    def count_by_restaurant_and_availability(
        self, restaurant_id: int, available: bool
    ) -> int:
        """Number of products of a restaurant with the given availability."""

    @abstractmethod
    def exists_for_restaurant(self, restaurant_id: int) -> bool:
        """Whether any product references the restaurant."""
