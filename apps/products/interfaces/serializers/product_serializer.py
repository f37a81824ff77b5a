"""
Product serializers.
"""
from rest_framework import serializers


class ProductSerializer(serializers.Serializer):
    """Serializer for product output."""
    id = serializers.UUIDField(read_only=True)
    product_number = serializers.CharField(read_only=True)
    name = serializers.CharField(read_only=True)
    description = serializers.CharField(read_only=True)
    price = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)
    currency = serializers.CharField(read_only=True)
    price_display = serializers.CharField(read_only=True)
    image = serializers.CharField(read_only=True)
    category = serializers.CharField(read_only=True)
    team = serializers.CharField(read_only=True)
    sizes = serializers.ListField(child=serializers.CharField(), read_only=True)
    stock = serializers.IntegerField(read_only=True)
    featured = serializers.BooleanField(read_only=True)
    is_in_stock = serializers.BooleanField(read_only=True)
    created_at = serializers.DateTimeField(read_only=True)
    updated_at = serializers.DateTimeField(read_only=True)


class SizesField(serializers.Field):
    """Accepts ``"S,M,L"`` or ``["S", "M", "L"]``."""

    def to_internal_value(self, data):
        if isinstance(data, str):
            return data
        if isinstance(data, list) and all(isinstance(size, str) for size in data):
            return data
        raise serializers.ValidationError("Sizes must be a comma separated string or a list of strings")

    def to_representation(self, value):
        return value


class ProductWriteSerializer(serializers.Serializer):
    """Serializer for product create and replace (admin)."""
    name = serializers.CharField(max_length=255)
    price = serializers.DecimalField(max_digits=12, decimal_places=2)
    description = serializers.CharField(required=False, allow_blank=True, default='')
    product_number = serializers.CharField(max_length=100, required=False, allow_blank=True, default='')
    image = serializers.CharField(max_length=500, required=False, allow_blank=True, default='')
    category = serializers.CharField(max_length=100, required=False, allow_blank=True, default='General')
    team = serializers.CharField(max_length=100, required=False, allow_blank=True, default='')
    sizes = SizesField(required=False, default='S,M,L,XL,2XL')
    stock = serializers.IntegerField(min_value=0, required=False, default=10)
    featured = serializers.BooleanField(required=False, default=False)

    def validate_name(self, value):
        if not value.strip():
            raise serializers.ValidationError("Product name is required")
        return value.strip()
