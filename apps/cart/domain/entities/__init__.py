# Domain entities
from .cart import Cart
from .cart_line_item import CartItemCandidate, CartLineItem

__all__ = ['Cart', 'CartItemCandidate', 'CartLineItem']
