"""
Order status value object.
"""
from enum import Enum


class OrderStatus(str, Enum):
    """Lifecycle of an order. Checkout payment is mocked, so orders start as PAID."""
    PENDING = 'pending'
    PAID = 'paid'
    SHIPPED = 'shipped'
    DELIVERED = 'delivered'
    CANCELLED = 'cancelled'

    @classmethod
    def choices(cls):
        return [(status.value, status.name.title()) for status in cls]
