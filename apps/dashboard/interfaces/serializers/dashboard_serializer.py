"""
Dashboard serializers.
"""
from rest_framework import serializers


class SystemEventSerializer(serializers.Serializer):
    """Serializer for activity feed output."""
    id = serializers.UUIDField(read_only=True)
    type = serializers.CharField(read_only=True)
    message = serializers.CharField(read_only=True)
    metadata = serializers.JSONField(read_only=True, allow_null=True)
    created_at = serializers.DateTimeField(read_only=True)


class SystemEventCreateSerializer(serializers.Serializer):
    """Serializer for recording an activity feed entry."""
    type = serializers.CharField(max_length=50)
    message = serializers.CharField()
    metadata = serializers.JSONField(required=False, allow_null=True)


class DailyRevenueSerializer(serializers.Serializer):
    """One point of the sales chart."""
    date = serializers.DateField(read_only=True)
    label = serializers.CharField(read_only=True)
    revenue = serializers.DecimalField(max_digits=None, decimal_places=2, read_only=True)


class SystemStatusSerializer(serializers.Serializer):
    """Serializer for dashboard header counters."""
    product_count = serializers.IntegerField(read_only=True)
    order_count = serializers.IntegerField(read_only=True)
    event_count = serializers.IntegerField(read_only=True)
    storage_bytes = serializers.IntegerField(read_only=True, allow_null=True)
