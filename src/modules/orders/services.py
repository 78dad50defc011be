"""Order service layer (Use Cases).

Orchestrates order creation, the status lifecycle and the reporting
queries.  Every write runs in one transaction; domain events are
published on the injected bus only after that transaction commits.

Business rules enforced:
- Customer must exist and be active to place an order.
- New orders start ``PENDING``.
- Status transitions are authorised by ``state_machine.validate_transition``.
- Revenue counts only ``CONFIRMED`` and ``DELIVERED`` orders.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from functools import partial
from typing import TYPE_CHECKING, List, Optional

import structlog
from django.db import transaction
from django.utils import timezone

from modules.core.validators import validate_period
from modules.customers.exceptions import CustomerNotFound
from modules.orders import pricing, state_machine
from modules.orders.constants import REVENUE_STATUSES, OrderStatus
from modules.orders.events import OrderCreated, OrderStatusChanged
from modules.orders.exceptions import (
    InactiveCustomer,
    InvalidOrderStatus,
    InvalidStatusTransition,
    OrderNotFound,
)
from modules.orders.models import Order

if TYPE_CHECKING:
    from modules.customers.repositories.interfaces import ICustomerRepository
    from modules.orders.dtos import CreateOrderDTO
    from modules.orders.repositories.interfaces import IOrderRepository
    from shared.infrastructure.bus import EventPublisher
    from shared.domain.events import DomainEvent

logger = structlog.get_logger(__name__)


class OrderService:
    """Application service for Order use-cases.

    Receives repositories and the event bus via constructor injection (DIP).
    """

    def __init__(
        self,
        order_repository: IOrderRepository,
        customer_repository: ICustomerRepository,
        event_bus: EventPublisher,
    ) -> None:
        self._order_repo = order_repository
        self._customer_repo = customer_repository
        self._event_bus = event_bus

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_order(self, dto: CreateOrderDTO) -> Order:
        """Create a ``PENDING`` order for an active customer.

        Raises:
            CustomerNotFound: customer does not exist.
            InactiveCustomer: customer is inactive.
        """
        customer_id = dto.customer_id
        log = logger.bind(customer_id=customer_id)

        customer = self._customer_repo.get_by_id(customer_id)
        if not customer:
            raise CustomerNotFound(f"Customer {customer_id} not found.")
        if not customer.is_active:
            log.warning("order.inactive_customer")
            raise InactiveCustomer("Cannot create order for inactive customer.")

        order = self._order_repo.create(
            Order(
                customer=customer,
                status=OrderStatus.PENDING,
                total_amount=dto.total_amount,
                created_at=timezone.now(),
            )
        )
        log.info("order.created", order_id=order.id, total_amount=str(order.total_amount))
        self._publish(
            OrderCreated(
                aggregate_id=order.id,
                customer_id=customer_id,
                total_amount=order.total_amount,
            )
        )
        return order

    @transaction.atomic
    def update_status(self, order_id: int, new_status: str) -> Order:
        """Move an order to ``new_status``.

        Acquires a row-level lock (``SELECT FOR UPDATE``) on the order
        before validating the transition.

        Raises:
            OrderNotFound: order does not exist.
            InvalidOrderStatus: ``new_status`` is not a known status.
            InvalidStatusTransition: the transition is not allowed.
        """
        order = self._order_repo.get_for_update(order_id)
        if not order:
            raise OrderNotFound(f"Order {order_id} not found.")

        log = logger.bind(
            order_id=order_id,
            current_status=order.status,
            new_status=str(new_status),
        )

        try:
            target = state_machine.validate_transition(order.status, new_status)
        except (InvalidOrderStatus, InvalidStatusTransition) as exc:
            log.warning("order.invalid_transition", reason=exc.message)
            raise

        old_status = order.status
        order.status = target
        order = self._order_repo.save(order)

        log.info("order.status_updated")
        self._publish(
            OrderStatusChanged(
                aggregate_id=order.id,
                old_status=old_status,
                new_status=target.value,
            )
        )
        return order

    def confirm_order(self, order_id: int) -> Order:
        return self.update_status(order_id, OrderStatus.CONFIRMED)

    def start_preparation(self, order_id: int) -> Order:
        return self.update_status(order_id, OrderStatus.IN_PREPARATION)

    def leave_for_delivery(self, order_id: int) -> Order:
        return self.update_status(order_id, OrderStatus.OUT_FOR_DELIVERY)

    def deliver_order(self, order_id: int) -> Order:
        return self.update_status(order_id, OrderStatus.DELIVERED)

    def cancel_order(self, order_id: int) -> Order:
        return self.update_status(order_id, OrderStatus.CANCELED)

    @transaction.atomic
    def delete_order(self, order_id: int) -> None:
        order = self.get_order(order_id)
        self._order_repo.delete(order)
        logger.info("order.deleted", order_id=order_id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_order(self, order_id: int) -> Order:
        """Raises ``OrderNotFound`` when absent."""
        order = self._order_repo.get_by_id(order_id)
        if not order:
            raise OrderNotFound(f"Order {order_id} not found.")
        return order

    def list_orders(self) -> List[Order]:
        """All orders grouped by status, newest first within each status."""
        return self._order_repo.list_all()

    def list_orders_by_customer(self, customer_id: int) -> List[Order]:
        self._require_customer(customer_id)
        return self._order_repo.list_by_customer(customer_id)

    def list_orders_by_status(self, status: str) -> List[Order]:
        return self._order_repo.list_by_status(state_machine.parse_status(status))

    def list_orders_by_customer_and_status(
        self, customer_id: int, status: str
    ) -> List[Order]:
        target = state_machine.parse_status(status)
        self._require_customer(customer_id)
        return self._order_repo.list_by_customer_and_status(customer_id, target)

    def list_orders_by_period(
        self, start: Optional[datetime], end: Optional[datetime]
    ) -> List[Order]:
        validate_period(start, end)
        return self._order_repo.list_by_period(start, end)

    def list_orders_by_customer_and_period(
        self,
        customer_id: int,
        start: Optional[datetime],
        end: Optional[datetime],
    ) -> List[Order]:
        validate_period(start, end)
        self._require_customer(customer_id)
        return self._order_repo.list_by_customer_and_period(customer_id, start, end)

    def count_orders_by_status(self, status: str) -> int:
        return self._order_repo.count_by_status(state_machine.parse_status(status))

    def count_orders_by_customer(self, customer_id: int) -> int:
        self._require_customer(customer_id)
        return self._order_repo.count_by_customer(customer_id)

    def get_total_revenue(
        self, start: Optional[datetime], end: Optional[datetime]
    ) -> Decimal:
        """Sum of confirmed and delivered order totals created in ``[start, end]``."""
        validate_period(start, end)
        return self._order_repo.sum_revenue(start, end, REVENUE_STATUSES)

    # ------------------------------------------------------------------
    # Pricing
    # ------------------------------------------------------------------

    def calculate_total(
        self, subtotal: Decimal, discount_percent: Optional[Decimal] = None
    ) -> Decimal:
        return pricing.calculate_total(subtotal, discount_percent)

    def calculate_total_with_fixed_discount(
        self, subtotal: Decimal, discount: Optional[Decimal] = None
    ) -> Decimal:
        return pricing.calculate_total_with_fixed_discount(subtotal, discount)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _require_customer(self, customer_id: int) -> None:
        if not self._customer_repo.get_by_id(customer_id):
            raise CustomerNotFound(f"Customer {customer_id} not found.")

    def _publish(self, event: DomainEvent) -> None:
        transaction.on_commit(partial(self._event_bus.publish, event))
