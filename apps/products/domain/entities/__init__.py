# Domain entities
from .product import Product, DEFAULT_SIZES, DEFAULT_CATEGORY

__all__ = ['Product', 'DEFAULT_SIZES', 'DEFAULT_CATEGORY']
