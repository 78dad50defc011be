from drf_spectacular.views import (
    SpectacularAPIView,
    SpectacularRedocView,
    SpectacularSwaggerView,
)

from django.urls import include, path

from config.container import build_container
from modules.customers.urls import build_urlpatterns as customer_urls
from modules.orders.urls import build_urlpatterns as order_urls
from modules.products.urls import build_urlpatterns as product_urls
from modules.restaurants.urls import build_urlpatterns as restaurant_urls

container = build_container()

urlpatterns = [
    path("", include("modules.core.urls")),
    # Domain modules (versioned API)
    path("api/v1/", include(customer_urls(container.customer_service))),
    path("api/v1/", include(restaurant_urls(container.restaurant_service))),
    path("api/v1/", include(product_urls(container.product_service))),
    path("api/v1/", include(order_urls(container.order_service))),
    # OpenAPI schema & docs
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    path(
        "api/docs/",
        SpectacularSwaggerView.as_view(url_name="schema"),
        name="swagger-ui",
    ),
    path("api/redoc/", SpectacularRedocView.as_view(url_name="schema"), name="redoc"),
]
