# Serializers
from .product_serializer import ProductSerializer, ProductWriteSerializer

__all__ = ['ProductSerializer', 'ProductWriteSerializer']
