# Serializers
from .order_serializer import (
    OrderSerializer,
    OrderItemSerializer,
    CustomerInfoSerializer,
    CheckoutSerializer,
    OrderStatusUpdateSerializer,
)

__all__ = [
    'OrderSerializer',
    'OrderItemSerializer',
    'CustomerInfoSerializer',
    'CheckoutSerializer',
    'OrderStatusUpdateSerializer',
]
