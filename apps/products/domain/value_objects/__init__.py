# Value objects
from .money import DEFAULT_CURRENCY, Money
from .stock import DEFAULT_STOCK, Stock

__all__ = ['DEFAULT_CURRENCY', 'Money', 'DEFAULT_STOCK', 'Stock']
