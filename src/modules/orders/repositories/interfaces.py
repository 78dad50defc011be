"""Order repository interface.

Extends ``IRepository[Order]`` with the listing, counting and revenue
queries used by ``OrderService``.  Every list is ordered newest first
(ties broken by id, newest first) except ``list_all``, which groups by
status before that.
"""

from __future__ import annotations

from abc import abstractmethod
from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Iterable, List, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.orders.models import Order


class IOrderRepository(IRepository["Order"]):
    """Repository contract for the Order aggregate root."""

    @abstractmethod
    def get_for_update(self, id: int) -> Optional[Order]:
        """Retrieve an order with a row-level lock (SELECT FOR UPDATE)."""

    @abstractmethod
    def list_all(self) -> List[Order]:
        """All orders ordered by status, then newest first."""

    @abstractmethod
    def list_by_customer(self, customer_id: int) -> List[Order]: ...

    @abstractmethod
    def list_by_status(self, status: str) -> List[Order]: ...

    @abstractmethod
    def list_by_customer_and_status(self, customer_id: int, status: str) -> List[Order]: ...

    @abstractmethod
    def list_by_period(self, start: datetime, end: datetime) -> List[Order]:
        """Orders created within ``[start, end]``."""

    @abstractmethod
    def list_by_customer_and_period(
        self, customer_id: int, start: datetime, end: datetime
    ) -> List[Order]: ...

    @abstractmethod
    def count_by_status(self, status: str) -> int: ...

    @abstractmethod
    def count_by_customer(self, customer_id: int) -> int: ...

    @abstractmethod
    def exists_for_customer(self, customer_id: int) -> bool:
        """Whether any order references the customer."""

    @abstractmethod
    def sum_revenue(
        self, start: datetime, end: datetime, statuses: Iterable[str]
    ) -> Decimal:
        """Sum of ``total_amount`` for matching orders in ``[start, end]`` (0 if none)."""
