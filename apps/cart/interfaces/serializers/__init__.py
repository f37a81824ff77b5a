# Serializers
from .cart_serializer import (
    CartSerializer,
    CartLineSerializer,
    CartItemKeySerializer,
    CartItemCreateSerializer,
)

__all__ = [
    'CartSerializer',
    'CartLineSerializer',
    'CartItemKeySerializer',
    'CartItemCreateSerializer',
]
