"""Restaurant API views."""

from __future__ import annotations

from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response

from modules.core.serializers import CountSerializer, StatusFlagSerializer
from modules.core.viewsets import ServiceViewSet
from modules.restaurants.dtos import CreateRestaurantDTO, UpdateRestaurantDTO
from modules.restaurants.models import Restaurant
from modules.restaurants.serializers import (
    RestaurantCategoryQuerySerializer,
    RestaurantListQuerySerializer,
    RestaurantNameQuerySerializer,
    RestaurantSerializer,
)


class RestaurantViewSet(ServiceViewSet):
    """Restaurant CRUD, activation, search and category ranking."""

    queryset = Restaurant.objects.all()
    serializer_class = RestaurantSerializer

    @extend_schema(parameters=[RestaurantListQuerySerializer])
    def list(self, request: Request) -> Response:
        """GET /api/v1/restaurants/

        ``?active=true`` returns active restaurants best rated first;
        otherwise every restaurant ordered by name.
        """
        query = self.validated_query(RestaurantListQuerySerializer)
        if query["active"]:
            restaurants = self.service.list_active_restaurants()
        else:
            restaurants = self.service.list_restaurants()
        return self.paginated_response(restaurants)

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        restaurant = self.service.get_restaurant(self.lookup_id())
        return Response(RestaurantSerializer(restaurant).data)

    def create(self, request: Request) -> Response:
        dto = CreateRestaurantDTO.model_validate(request.data)
        restaurant = self.service.create_restaurant(dto)
        return Response(
            RestaurantSerializer(restaurant).data, status=status.HTTP_201_CREATED
        )

    def update(self, request: Request, pk: str | None = None) -> Response:
        dto = UpdateRestaurantDTO.model_validate(request.data)
        restaurant = self.service.update_restaurant(self.lookup_id(), dto)
        return Response(RestaurantSerializer(restaurant).data)

    def partial_update(self, request: Request, pk: str | None = None) -> Response:
        return self.update(request, pk)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        self.service.delete_restaurant(self.lookup_id())
        return Response(status=status.HTTP_204_NO_CONTENT)

    # ------------------------------------------------------------------
    # Activation
    # ------------------------------------------------------------------

    @extend_schema(request=None)
    @action(detail=True, methods=["post"])
    def activate(self, request: Request, pk: str | None = None) -> Response:
        restaurant = self.service.activate_restaurant(self.lookup_id())
        return Response(RestaurantSerializer(restaurant).data)

    @extend_schema(request=None)
    @action(detail=True, methods=["post"])
    def deactivate(self, request: Request, pk: str | None = None) -> Response:
        restaurant = self.service.deactivate_restaurant(self.lookup_id())
        return Response(RestaurantSerializer(restaurant).data)

    @extend_schema(responses=StatusFlagSerializer)
    @action(detail=True, methods=["get"], url_path="status")
    def active_status(self, request: Request, pk: str | None = None) -> Response:
        restaurant_id = self.lookup_id()
        return Response(
            {"id": restaurant_id, "active": self.service.is_restaurant_active(restaurant_id)}
        )

    # ------------------------------------------------------------------
    # Look-ups
    # ------------------------------------------------------------------

    @extend_schema(parameters=[RestaurantNameQuerySerializer])
    @action(detail=False, methods=["get"], url_path="by-name")
    def by_name(self, request: Request) -> Response:
        query = self.validated_query(RestaurantNameQuerySerializer)
        restaurant = self.service.get_restaurant_by_name(query["name"])
        return Response(RestaurantSerializer(restaurant).data)

    @extend_schema(parameters=[RestaurantNameQuerySerializer])
    @action(detail=False, methods=["get"])
    def search(self, request: Request) -> Response:
        query = self.validated_query(RestaurantNameQuerySerializer)
        return self.paginated_response(self.service.search_restaurants_by_name(query["name"]))

    @extend_schema(parameters=[RestaurantCategoryQuerySerializer])
    @action(detail=False, methods=["get"], url_path="by-category")
    def by_category(self, request: Request) -> Response:
        query = self.validated_query(RestaurantCategoryQuerySerializer)
        return self.paginated_response(
            self.service.list_restaurants_by_category(query["category"])
        )

    @extend_schema(
        parameters=[RestaurantCategoryQuerySerializer], responses=CountSerializer
    )
    @action(detail=False, methods=["get"], url_path="count-by-category")
    def count_by_category(self, request: Request) -> Response:
        query = self.validated_query(RestaurantCategoryQuerySerializer)
        count = self.service.count_active_restaurants_by_category(query["category"])
        return Response({"count": count})
