"""Customer repository interface.

Extends ``IRepository[Customer]`` with the look-ups needed by the
unique-email rule and the active-customer listings.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, List, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.customers.models import Customer


class ICustomerRepository(IRepository["Customer"]):
    """Repository contract for the Customer aggregate."""

    @abstractmethod
    def get_by_email(self, email: str) -> Optional[Customer]:
        """Retrieve a customer by email, active or not."""

    @abstractmethod
    def get_active_by_email(self, email: str) -> Optional[Customer]:
        """Retrieve an active customer by email."""

    @abstractmethod
    def list_active(self) -> List[Customer]:
        """Active customers ordered by name."""

    @abstractmethod
    def count_active(self) -> int:
        """Number of active customers."""
