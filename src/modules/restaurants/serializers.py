"""Restaurant DRF serializers (output and query-string parsing)."""

from __future__ import annotations

from rest_framework import serializers

from modules.restaurants.models import Restaurant


class RestaurantSerializer(serializers.ModelSerializer):
    class Meta:
        model = Restaurant
        fields = [
            "id",
            "name",
            "category",
            "rating",
            "is_active",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


# ---------------------------------------------------------------------------
# Query parameters
# ---------------------------------------------------------------------------


class RestaurantListQuerySerializer(serializers.Serializer):
    active = serializers.BooleanField(required=False, default=False)


class RestaurantNameQuerySerializer(serializers.Serializer):
    name = serializers.CharField()


class RestaurantCategoryQuerySerializer(serializers.Serializer):
    category = serializers.CharField()
