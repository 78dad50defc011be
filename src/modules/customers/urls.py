"""Customer URL configuration."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rest_framework.routers import DefaultRouter

from modules.customers.views import CustomerViewSet

if TYPE_CHECKING:
    from modules.customers.services import CustomerService


def build_urlpatterns(service: CustomerService) -> list:
    router = DefaultRouter(trailing_slash=True)
    router.include_root_view = False
    router.register("customers", CustomerViewSet.bind(service), basename="customer")
    return router.urls
