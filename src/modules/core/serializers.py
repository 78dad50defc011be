"""Response shapes shared by several modules (documentation only)."""

from rest_framework import serializers


class CountSerializer(serializers.Serializer):
    count = serializers.IntegerField()


class StatusFlagSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    active = serializers.BooleanField()
