"""Customer API views.

Exposes ``CustomerService`` over HTTP.  Domain exceptions propagate to
the DRF exception handler (``modules.core.exception_handler``), which
renders them as 400/404 responses.
"""

from __future__ import annotations

from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response

from modules.core.serializers import CountSerializer
from modules.core.viewsets import ServiceViewSet
from modules.customers.dtos import CreateCustomerDTO, UpdateCustomerDTO
from modules.customers.models import Customer
from modules.customers.serializers import CustomerEmailQuerySerializer, CustomerSerializer


class CustomerViewSet(ServiceViewSet):
    """Customer CRUD plus activation and email look-up."""

    queryset = Customer.objects.all()
    serializer_class = CustomerSerializer

    def list(self, request: Request) -> Response:
        """GET /api/v1/customers/ (active customers, by name)"""
        return self.paginated_response(self.service.list_active_customers())

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/customers/{pk}/"""
        customer = self.service.get_customer(self.lookup_id())
        return Response(CustomerSerializer(customer).data)

    def create(self, request: Request) -> Response:
        """POST /api/v1/customers/"""
        dto = CreateCustomerDTO.model_validate(request.data)
        customer = self.service.create_customer(dto)
        return Response(CustomerSerializer(customer).data, status=status.HTTP_201_CREATED)

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT/PATCH /api/v1/customers/{pk}/ (only supplied fields change)"""
        dto = UpdateCustomerDTO.model_validate(request.data)
        customer = self.service.update_customer(self.lookup_id(), dto)
        return Response(CustomerSerializer(customer).data)

    def partial_update(self, request: Request, pk: str | None = None) -> Response:
        return self.update(request, pk)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/customers/{pk}/"""
        self.service.delete_customer(self.lookup_id())
        return Response(status=status.HTTP_204_NO_CONTENT)

    # ------------------------------------------------------------------
    # Activation
    # ------------------------------------------------------------------

    @extend_schema(request=None)
    @action(detail=True, methods=["post"])
    def activate(self, request: Request, pk: str | None = None) -> Response:
        customer = self.service.activate_customer(self.lookup_id())
        return Response(CustomerSerializer(customer).data)

    @extend_schema(request=None)
    @action(detail=True, methods=["post"])
    def deactivate(self, request: Request, pk: str | None = None) -> Response:
        customer = self.service.deactivate_customer(self.lookup_id())
        return Response(CustomerSerializer(customer).data)

    # ------------------------------------------------------------------
    # Look-ups
    # ------------------------------------------------------------------

    @extend_schema(parameters=[CustomerEmailQuerySerializer])
    @action(detail=False, methods=["get"], url_path="by-email")
    def by_email(self, request: Request) -> Response:
        """GET /api/v1/customers/by-email/?email=..."""
        query = self.validated_query(CustomerEmailQuerySerializer)
        customer = self.service.get_active_customer_by_email(query["email"])
        return Response(CustomerSerializer(customer).data)

    @extend_schema(responses=CountSerializer)
    @action(detail=False, methods=["get"], url_path="count-active")
    def count_active(self, request: Request) -> Response:
        return Response({"count": self.service.count_active_customers()})
