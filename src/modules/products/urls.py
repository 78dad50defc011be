"""Product URL configuration."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rest_framework.routers import DefaultRouter

from modules.products.views import ProductViewSet

if TYPE_CHECKING:
    from modules.products.services import ProductService


def build_urlpatterns(service: ProductService) -> list:
    router = DefaultRouter(trailing_slash=True)
    router.include_root_view = False
    router.register("products", ProductViewSet.bind(service), basename="product")
    return router.urls
