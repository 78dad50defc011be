"""Order API views.

Exposes ``OrderService`` via HTTP using a DRF ViewSet.  Status changes go
through dedicated actions; domain errors are rendered by the DRF
exception handler.
"""

from __future__ import annotations

from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response

from modules.core.serializers import CountSerializer
from modules.core.viewsets import ServiceViewSet
from modules.orders.dtos import CalculateTotalDTO, CreateOrderDTO
from modules.orders.models import Order
from modules.orders.serializers import (
    OrderCountQuerySerializer,
    OrderListQuerySerializer,
    OrderSerializer,
    PeriodQuerySerializer,
    RevenueSerializer,
    StatusUpdateSerializer,
    TotalSerializer,
)


class OrderViewSet(ServiceViewSet):
    """Order creation, lifecycle transitions and reporting."""

    queryset = Order.objects.all()
    serializer_class = OrderSerializer

    # ------------------------------------------------------------------
    # Create / Retrieve / Delete
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/v1/orders/"""
        dto = CreateOrderDTO.model_validate(request.data)
        order = self.service.create_order(dto)
        return Response(OrderSerializer(order).data, status=status.HTTP_201_CREATED)

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        order = self.service.get_order(self.lookup_id())
        return Response(OrderSerializer(order).data)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        self.service.delete_order(self.lookup_id())
        return Response(status=status.HTTP_204_NO_CONTENT)

    # ------------------------------------------------------------------
    # List
    # ------------------------------------------------------------------

    @extend_schema(parameters=[OrderListQuerySerializer])
    def list(self, request: Request) -> Response:
        """GET /api/v1/orders/[?customer=][&status=][&start=&end=]"""
        query = self.validated_query(OrderListQuerySerializer)
        customer_id = query.get("customer")
        order_status = query.get("status")
        start, end = query.get("start"), query.get("end")

        if customer_id and order_status:
            orders = self.service.list_orders_by_customer_and_status(
                customer_id, order_status
            )
        elif customer_id and start:
            orders = self.service.list_orders_by_customer_and_period(
                customer_id, start, end
            )
        elif customer_id:
            orders = self.service.list_orders_by_customer(customer_id)
        elif order_status:
            orders = self.service.list_orders_by_status(order_status)
        elif start:
            orders = self.service.list_orders_by_period(start, end)
        else:
            orders = self.service.list_orders()
        return self.paginated_response(orders)

    # ------------------------------------------------------------------
    # Status transitions
    # ------------------------------------------------------------------

    @extend_schema(request=StatusUpdateSerializer, responses=OrderSerializer)
    @action(detail=True, methods=["patch"], url_path="status")
    def update_status(self, request: Request, pk: str | None = None) -> Response:
        """PATCH /api/v1/orders/{pk}/status/ {"status": "CONFIRMED"}"""
        payload = StatusUpdateSerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        order = self.service.update_status(
            self.lookup_id(), payload.validated_data["status"]
        )
        return Response(OrderSerializer(order).data)

    @extend_schema(request=None)
    @action(detail=True, methods=["post"])
    def confirm(self, request: Request, pk: str | None = None) -> Response:
        order = self.service.confirm_order(self.lookup_id())
        return Response(OrderSerializer(order).data)

    @extend_schema(request=None)
    @action(detail=True, methods=["post"], url_path="start-preparation")
    def start_preparation(self, request: Request, pk: str | None = None) -> Response:
        order = self.service.start_preparation(self.lookup_id())
        return Response(OrderSerializer(order).data)

    @extend_schema(request=None)
    @action(detail=True, methods=["post"], url_path="leave-for-delivery")
    def leave_for_delivery(self, request: Request, pk: str | None = None) -> Response:
        order = self.service.leave_for_delivery(self.lookup_id())
        return Response(OrderSerializer(order).data)

    @extend_schema(request=None)
    @action(detail=True, methods=["post"])
    def deliver(self, request: Request, pk: str | None = None) -> Response:
        order = self.service.deliver_order(self.lookup_id())
        return Response(OrderSerializer(order).data)

    @extend_schema(request=None)
    @action(detail=True, methods=["post"])
    def cancel(self, request: Request, pk: str | None = None) -> Response:
        order = self.service.cancel_order(self.lookup_id())
        return Response(OrderSerializer(order).data)

    # ------------------------------------------------------------------
    # Reporting
    # ------------------------------------------------------------------

    @extend_schema(parameters=[OrderCountQuerySerializer], responses=CountSerializer)
    @action(detail=False, methods=["get"])
    def count(self, request: Request) -> Response:
        """GET /api/v1/orders/count/?status=... or ?customer=..."""
        query = self.validated_query(OrderCountQuerySerializer)
        if "customer" in query:
            count = self.service.count_orders_by_customer(query["customer"])
        else:
            count = self.service.count_orders_by_status(query["status"])
        return Response({"count": count})

    @extend_schema(parameters=[PeriodQuerySerializer], responses=RevenueSerializer)
    @action(detail=False, methods=["get"])
    def revenue(self, request: Request) -> Response:
        """GET /api/v1/orders/revenue/?start=...&end=... (confirmed + delivered)"""
        query = self.validated_query(PeriodQuerySerializer)
        total = self.service.get_total_revenue(query["start"], query["end"])
        return Response(
            RevenueSerializer(
                {"start": query["start"], "end": query["end"], "total_revenue": total}
            ).data
        )

    @extend_schema(request=TotalSerializer, responses=TotalSerializer)
    @action(detail=False, methods=["post"], url_path="calculate-total")
    def calculate_total(self, request: Request) -> Response:
        """POST /api/v1/orders/calculate-total/

        Body: ``subtotal`` plus optional ``discount_percent`` *or*
        ``discount_amount``.
        """
        dto = CalculateTotalDTO.model_validate(request.data)
        if dto.discount_amount is not None:
            total = self.service.calculate_total_with_fixed_discount(
                dto.subtotal, dto.discount_amount
            )
        else:
            total = self.service.calculate_total(dto.subtotal, dto.discount_percent)
        return Response(TotalSerializer({"subtotal": dto.subtotal, "total": total}).data)
