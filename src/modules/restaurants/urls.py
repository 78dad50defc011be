"""Restaurant URL configuration."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rest_framework.routers import DefaultRouter

from modules.restaurants.views import RestaurantViewSet

if TYPE_CHECKING:
    from modules.restaurants.services import RestaurantService


def build_urlpatterns(service: RestaurantService) -> list:
    router = DefaultRouter(trailing_slash=True)
    router.include_root_view = False
    router.register("restaurants", RestaurantViewSet.bind(service), basename="restaurant")
    return router.urls
