"""Unit tests for domain events and the in-memory event bus."""

from __future__ import annotations

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from modules.orders.events import OrderCreated, OrderStatusChanged
from modules.orders.handlers import (
    OrderCreatedHandler,
    OrderStatusChangedHandler,
    register_order_handlers,
)
from shared.infrastructure.bus import InMemoryEventBus

pytestmark = pytest.mark.unit


def _order_created(**overrides) -> OrderCreated:
    defaults = {"aggregate_id": 1, "customer_id": 10, "total_amount": Decimal("50.00")}
    defaults.update(overrides)
    return OrderCreated(**defaults)


class TestDomainEvent:
    def test_event_name_is_class_name(self):
        event = _order_created()
        assert event.event_name == "OrderCreated"
        assert event.event_id is not None
        assert event.occurred_on.tzinfo is not None

    def test_events_are_immutable(self):
        event = _order_created()
        with pytest.raises(AttributeError):
            event.customer_id = 99

    def test_each_event_gets_its_own_id(self):
        assert _order_created().event_id != _order_created().event_id


class TestInMemoryEventBus:
    def test_publish_calls_subscribed_handler(self):
        bus = InMemoryEventBus()
        handler = MagicMock()
        bus.subscribe(OrderCreated, handler)

        event = _order_created()
        bus.publish(event)

        handler.handle.assert_called_once_with(event)

    def test_handlers_only_receive_their_event_class(self):
        bus = InMemoryEventBus()
        handler = MagicMock()
        bus.subscribe(OrderStatusChanged, handler)

        bus.publish(_order_created())

        handler.handle.assert_not_called()

    def test_subscribe_is_idempotent(self):
        bus = InMemoryEventBus()
        handler = MagicMock()
        bus.subscribe(OrderCreated, handler)
        bus.subscribe(OrderCreated, handler)

        bus.publish(_order_created())

        assert handler.handle.call_count == 1
        assert bus.handlers_for(OrderCreated) == [handler]

    def test_publish_without_handlers_is_noop(self):
        InMemoryEventBus().publish(_order_created())

    def test_register_order_handlers(self):
        bus = InMemoryEventBus()
        register_order_handlers(bus)

        assert isinstance(bus.handlers_for(OrderCreated)[0], OrderCreatedHandler)
        assert isinstance(
            bus.handlers_for(OrderStatusChanged)[0], OrderStatusChangedHandler
        )

    def test_handlers_run_without_error(self):
        bus = InMemoryEventBus()
        register_order_handlers(bus)

        bus.publish(_order_created())
        bus.publish(
            OrderStatusChanged(aggregate_id=1, old_status="PENDING", new_status="CONFIRMED")
        )
