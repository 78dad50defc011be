"""Order URL configuration."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rest_framework.routers import DefaultRouter

from modules.orders.views import OrderViewSet

if TYPE_CHECKING:
    from modules.orders.services import OrderService


def build_urlpatterns(service: OrderService) -> list:
    router = DefaultRouter(trailing_slash=True)
    router.include_root_view = False
    router.register("orders", OrderViewSet.bind(service), basename="order")
    return router.urls
