# Domain events
from .product_created import ProductCreated
from .product_updated import ProductUpdated

__all__ = ['ProductCreated', 'ProductUpdated']
