"""Restaurant repository interface.

The ordering of every list method is part of the contract: clients use
it as display order.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, List, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.restaurants.models import Restaurant


class IRestaurantRepository(IRepository["Restaurant"]):
    """Repository contract for the Restaurant aggregate."""

    @abstractmethod
    def get_by_name(self, name: str) -> Optional[Restaurant]:
        """Exact-name look-up."""

    @abstractmethod
    def search_by_name(self, fragment: str) -> List[Restaurant]:
        """Case-insensitive containment, ordered by name."""

    @abstractmethod
    def list_all(self) -> List[Restaurant]:
        """All restaurants ordered by name."""

    @abstractmethod
    def list_active(self) -> List[Restaurant]:
        """Active restaurants, best rated first, then by name."""

    @abstractmethod
    def list_active_by_category(self, category: str) -> List[Restaurant]:
        """Active restaurants of a category, best rated first, then by name."""

    @abstractmethod
    def count_active_by_category(self, category: str) -> int:
        """Number of active restaurants in a category."""
