# Use cases
from .place_order import PlaceOrderUseCase
from .list_customer_orders import ListCustomerOrdersUseCase

__all__ = ['PlaceOrderUseCase', 'ListCustomerOrdersUseCase']
