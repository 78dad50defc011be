"""Django ORM implementation of the Order repository.

Concurrency control on status updates uses ``select_for_update()``: two
transitions on the same order serialize on the row lock (a no-op on
SQLite, where the last write wins).
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Iterable, List, Optional

import structlog
from django.core.exceptions import ValidationError
from django.db.models import Sum

from modules.orders.models import Order
from modules.orders.repositories.interfaces import IOrderRepository

logger = structlog.get_logger(__name__)

NEWEST_FIRST = ("-created_at", "-id")


class OrderDjangoRepository(IOrderRepository):
    """Concrete Order repository backed by Django ORM."""

    def get_by_id(self, id: int) -> Optional[Order]:
        """Returns ``None`` for non-existent or invalid IDs."""
        try:
            return Order.objects.filter(id=id).first()
        except (ValueError, TypeError, ValidationError):
            return None

    def get_for_update(self, id: int) -> Optional[Order]:
        try:
            return Order.objects.select_for_update().filter(id=id).first()
        except (ValueError, TypeError, ValidationError):
            return None

    def create(self, entity: Order) -> Order:
        entity.save(force_insert=True)
        logger.debug("order.inserted", order_id=entity.id)
        return entity

    def save(self, entity: Order) -> Order:
        entity.save()
        return entity

    def delete(self, entity: Order) -> None:
        order_id = entity.id
        entity.delete()
        logger.debug("order.deleted_row", order_id=order_id)

    # ------------------------------------------------------------------
    # Listings
    # ------------------------------------------------------------------

    def list_all(self) -> List[Order]:
        return list(Order.objects.order_by("status", *NEWEST_FIRST))

    def list_by_customer(self, customer_id: int) -> List[Order]:
        return list(Order.objects.filter(customer_id=customer_id).order_by(*NEWEST_FIRST))

    def list_by_status(self, status: str) -> List[Order]:
        return list(Order.objects.filter(status=status).order_by(*NEWEST_FIRST))

    def list_by_customer_and_status(self, customer_id: int, status: str) -> List[Order]:
        return list(
            Order.objects.filter(customer_id=customer_id, status=status).order_by(
                *NEWEST_FIRST
            )
        )

    def list_by_period(self, start: datetime, end: datetime) -> List[Order]:
        return list(
            Order.objects.filter(created_at__range=(start, end)).order_by(*NEWEST_FIRST)
        )

    def list_by_customer_and_period(
        self, customer_id: int, start: datetime, end: datetime
    ) -> List[Order]:
        return list(
            Order.objects.filter(
                customer_id=customer_id, created_at__range=(start, end)
            ).order_by(*NEWEST_FIRST)
        )

    # ------------------------------------------------------------------
    # Aggregates
    # ------------------------------------------------------------------

    def count_by_status(self, status: str) -> int:
        return Order.objects.filter(status=status).count()

    def count_by_customer(self, customer_id: int) -> int:
        return Order.objects.filter(customer_id=customer_id).count()

    def exists_for_customer(self, customer_id: int) -> bool:
        return Order.objects.filter(customer_id=customer_id).exists()

    def sum_revenue(
        self, start: datetime, end: datetime, statuses: Iterable[str]
    ) -> Decimal:
        total = Order.objects.filter(
            status__in=list(statuses), created_at__range=(start, end)
        ).aggregate(total=Sum("total_amount"))["total"]
        return total if total is not None else Decimal("0.00")
