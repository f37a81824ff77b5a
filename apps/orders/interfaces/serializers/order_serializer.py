"""
Order serializers.
"""
from rest_framework import serializers

from ...domain.value_objects.order_status import OrderStatus


class OrderItemSerializer(serializers.Serializer):
    """Serializer for order item output."""
    id = serializers.UUIDField(read_only=True)
    product_id = serializers.CharField(read_only=True)
    product_name = serializers.CharField(read_only=True)
    size = serializers.CharField(read_only=True)
    custom_name = serializers.CharField(read_only=True, allow_null=True)
    custom_number = serializers.CharField(read_only=True, allow_null=True)
    quantity = serializers.IntegerField(read_only=True)
    unit_price = serializers.DecimalField(max_digits=None, decimal_places=2, read_only=True)
    subtotal = serializers.DecimalField(max_digits=None, decimal_places=2, read_only=True)


class CustomerInfoSerializer(serializers.Serializer):
    """Serializer for checkout customer details."""
    email = serializers.EmailField(required=False, allow_blank=True)
    first_name = serializers.CharField(max_length=100, required=False, allow_blank=True, default='')
    last_name = serializers.CharField(max_length=100, required=False, allow_blank=True, default='')
    address = serializers.CharField(max_length=255, required=False, allow_blank=True, default='')
    city = serializers.CharField(max_length=100, required=False, allow_blank=True, default='')
    postal_code = serializers.CharField(max_length=20, required=False, allow_blank=True, default='')


class OrderSerializer(serializers.Serializer):
    """Serializer for order output."""
    id = serializers.UUIDField(read_only=True)
    order_number = serializers.CharField(read_only=True)
    status = serializers.CharField(read_only=True)
    items = OrderItemSerializer(many=True, read_only=True)
    total = serializers.DecimalField(max_digits=None, decimal_places=2, read_only=True)
    item_count = serializers.IntegerField(read_only=True)
    customer = CustomerInfoSerializer(read_only=True)
    created_at = serializers.DateTimeField(read_only=True)
    updated_at = serializers.DateTimeField(read_only=True)


class CheckoutSerializer(serializers.Serializer):
    """Serializer for placing an order from the session cart."""
    customer = CustomerInfoSerializer()


class OrderStatusUpdateSerializer(serializers.Serializer):
    """Serializer for moving an order through its lifecycle."""
    status = serializers.ChoiceField(choices=[status.value for status in OrderStatus])
