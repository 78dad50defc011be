"""Order DRF serializers for output and query-string parsing.

Input payloads become Pydantic DTOs (``dtos.py``); business validation
happens in ``OrderService``.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.orders.models import Order

# ---------------------------------------------------------------------------
# Output Serializers
# ---------------------------------------------------------------------------


class OrderSerializer(serializers.ModelSerializer):
    customer_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = Order
        fields = [
            "id",
            "customer_id",
            "status",
            "total_amount",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class RevenueSerializer(serializers.Serializer):
    start = serializers.DateTimeField()
    end = serializers.DateTimeField()
    total_revenue = serializers.DecimalField(max_digits=14, decimal_places=2)


class TotalSerializer(serializers.Serializer):
    subtotal = serializers.DecimalField(max_digits=14, decimal_places=2)
    total = serializers.DecimalField(max_digits=14, decimal_places=2)


# ---------------------------------------------------------------------------
# Input Serializers (query string / small bodies)
# ---------------------------------------------------------------------------


class StatusUpdateSerializer(serializers.Serializer):
    status = serializers.CharField()


class PeriodQuerySerializer(serializers.Serializer):
    start = serializers.DateTimeField()
    end = serializers.DateTimeField()


class OrderCountQuerySerializer(serializers.Serializer):
    """Exactly one of ``status`` or ``customer``."""

    status = serializers.CharField(required=False)
    customer = serializers.IntegerField(min_value=1, required=False)

    def validate(self, attrs):
        if ("status" in attrs) == ("customer" in attrs):
            raise serializers.ValidationError(
                "Provide exactly one of status or customer."
            )
        return attrs


class OrderListQuerySerializer(serializers.Serializer):
    """Filters for the order listing.

    Supported combinations: none, ``customer``, ``status``,
    ``customer`` + ``status``, ``start`` + ``end`` and
    ``customer`` + ``start`` + ``end``.
    """

    customer = serializers.IntegerField(min_value=1, required=False)
    status = serializers.CharField(required=False)
    start = serializers.DateTimeField(required=False)
    end = serializers.DateTimeField(required=False)

    def validate(self, attrs):
        has_start, has_end = "start" in attrs, "end" in attrs
        if has_start != has_end:
            raise serializers.ValidationError("start and end must be supplied together.")
        if has_start and "status" in attrs:
            raise serializers.ValidationError(
                "Filtering by status and period at the same time is not supported."
            )
        return attrs
