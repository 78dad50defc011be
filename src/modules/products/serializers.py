"""Product DRF serializers (output and query-string parsing)."""

from __future__ import annotations

from rest_framework import serializers

from modules.products.models import Product


class ProductSerializer(serializers.ModelSerializer):
    restaurant_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = Product
        fields = [
            "id",
            "name",
            "category",
            "is_available",
            "restaurant_id",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


# ---------------------------------------------------------------------------
# Query parameters
# ---------------------------------------------------------------------------


class ProductListQuerySerializer(serializers.Serializer):
    """``restaurant`` is mandatory; ``available`` and ``category`` narrow it.

    When ``category`` is given without ``available``, only available
    products are listed.
    """

    restaurant = serializers.IntegerField(min_value=1)
    available = serializers.BooleanField(required=False, allow_null=True, default=None)
    category = serializers.CharField(required=False)


class ProductCountQuerySerializer(serializers.Serializer):
    restaurant = serializers.IntegerField(min_value=1)
    available = serializers.BooleanField(required=False, default=True)
