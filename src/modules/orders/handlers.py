"""Order event handlers.

They only log for now; the bus calls them after the publishing
transaction has committed.
"""

from __future__ import annotations

import structlog

from modules.orders.events import OrderCreated, OrderStatusChanged
from shared.infrastructure.bus import InMemoryEventBus

logger = structlog.get_logger(__name__)


class OrderCreatedHandler:
    def handle(self, event: OrderCreated) -> None:
        logger.info(
            "order.created_event",
            event_id=str(event.event_id),
            order_id=event.aggregate_id,
            customer_id=event.customer_id,
            total_amount=str(event.total_amount),
        )


class OrderStatusChangedHandler:
    def handle(self, event: OrderStatusChanged) -> None:
        logger.info(
            "order.status_changed_event",
            event_id=str(event.event_id),
            order_id=event.aggregate_id,
            old_status=event.old_status,
            new_status=event.new_status,
        )


def register_order_handlers(bus: InMemoryEventBus) -> None:
    bus.subscribe(OrderCreated, OrderCreatedHandler())
    bus.subscribe(OrderStatusChanged, OrderStatusChangedHandler())
