# DTOs
from .cart_dto import CartDTO, CartLineDTO

__all__ = ['CartDTO', 'CartLineDTO']
