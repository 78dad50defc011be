"""Customer DRF serializers.

Output rendering and query-string parsing only.  Input payloads are
turned into Pydantic DTOs (``dtos.py``), which hold the field rules.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.core.validators import EMAIL_MAX_LENGTH, EMAIL_PATTERN
from modules.customers.models import Customer


class CustomerSerializer(serializers.ModelSerializer):
    """Read serializer for the Customer resource."""

    class Meta:
        model = Customer
        fields = [
            "id",
            "name",
            "email",
            "is_active",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class CustomerEmailQuerySerializer(serializers.Serializer):
    email = serializers.RegexField(EMAIL_PATTERN, max_length=EMAIL_MAX_LENGTH)
