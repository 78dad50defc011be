"""Service wiring.

``build_container`` is called once, when the URLconf is imported, and
the resulting services are handed to the ViewSets explicitly.  Tests can
build their own container (or services) with fakes.
"""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from modules.customers.repositories.django_repository import CustomerDjangoRepository
from modules.customers.services import CustomerService
from modules.orders.handlers import register_order_handlers
from modules.orders.repositories.django_repository import OrderDjangoRepository
from modules.orders.services import OrderService
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.services import ProductService
from modules.restaurants.repositories.django_repository import (
    RestaurantDjangoRepository,
)
from modules.restaurants.services import RestaurantService
from shared.infrastructure.bus import InMemoryEventBus

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class Container:
    event_bus: InMemoryEventBus
    customer_service: CustomerService
    restaurant_service: RestaurantService
    product_service: ProductService
    order_service: OrderService


def build_container() -> Container:
    customer_repo = CustomerDjangoRepository()
    restaurant_repo = RestaurantDjangoRepository()
    product_repo = ProductDjangoRepository()
    order_repo = OrderDjangoRepository()

    event_bus = InMemoryEventBus()
    register_order_handlers(event_bus)

    container = Container(
        event_bus=event_bus,
        customer_service=CustomerService(customer_repo, order_repo),
        restaurant_service=RestaurantService(restaurant_repo, product_repo),
        product_service=ProductService(product_repo, restaurant_repo),
        order_service=OrderService(order_repo, customer_repo, event_bus),
    )
    logger.debug("container.built")
    return container
