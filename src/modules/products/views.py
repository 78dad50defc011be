"""Product API views."""

from __future__ import annotations

from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response

from modules.core.serializers import CountSerializer, StatusFlagSerializer
from modules.core.viewsets import ServiceViewSet
from modules.products.dtos import CreateProductDTO, UpdateProductDTO
from modules.products.models import Product
from modules.products.serializers import (
    ProductCountQuerySerializer,
    ProductListQuerySerializer,
    ProductSerializer,
)


class ProductViewSet(ServiceViewSet):
    """Product CRUD, availability toggles and per-restaurant listings."""

    queryset = Product.objects.all()
    serializer_class = ProductSerializer

    @extend_schema(parameters=[ProductListQuerySerializer])
    def list(self, request: Request) -> Response:
        """GET /api/v1/products/?restaurant=<id>[&available=][&category=]"""
        query = self.validated_query(ProductListQuerySerializer)
        restaurant_id = query["restaurant"]
        available = query["available"]
        if "category" in query:
            products = self.service.list_products_by_restaurant_and_category(
                restaurant_id,
                query["category"],
                True if available is None else available,
            )
        else:
            products = self.service.list_products_by_restaurant(restaurant_id, available)
        return self.paginated_response(products)

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        product = self.service.get_product(self.lookup_id())
        return Response(ProductSerializer(product).data)

    def create(self, request: Request) -> Response:
        dto = CreateProductDTO.model_validate(request.data)
        product = self.service.create_product(dto)
        return Response(ProductSerializer(product).data, status=status.HTTP_201_CREATED)

    def update(self, request: Request, pk: str | None = None) -> Response:
        dto = UpdateProductDTO.model_validate(request.data)
        product = self.service.update_product(self.lookup_id(), dto)
        return Response(ProductSerializer(product).data)

    def partial_update(self, request: Request, pk: str | None = None) -> Response:
        return self.update(request, pk)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        self.service.delete_product(self.lookup_id())
        return Response(status=status.HTTP_204_NO_CONTENT)

    # ------------------------------------------------------------------
    # Availability
    # ------------------------------------------------------------------

    @extend_schema(request=None)
    @action(detail=True, methods=["post"])
    def activate(self, request: Request, pk: str | None = None) -> Response:
        product = self.service.activate_product(self.lookup_id())
        return Response(ProductSerializer(product).data)

    @extend_schema(request=None)
    @action(detail=True, methods=["post"])
    def deactivate(self, request: Request, pk: str | None = None) -> Response:
        product = self.service.deactivate_product(self.lookup_id())
        return Response(ProductSerializer(product).data)

    @extend_schema(responses=StatusFlagSerializer)
    @action(detail=True, methods=["get"], url_path="availability")
    def availability(self, request: Request, pk: str | None = None) -> Response:
        product_id = self.lookup_id()
        return Response(
            {"id": product_id, "active": self.service.is_product_available(product_id)}
        )

    @extend_schema(parameters=[ProductCountQuerySerializer], responses=CountSerializer)
    @action(detail=False, methods=["get"])
    def count(self, request: Request) -> Response:
        """GET /api/v1/products/count/?restaurant=<id>[&available=false]"""
        query = self.validated_query(ProductCountQuerySerializer)
        if query["available"]:
            count = self.service.count_available_products(query["restaurant"])
        else:
            count = self.service.count_unavailable_products(query["restaurant"])
        return Response({"count": count})
