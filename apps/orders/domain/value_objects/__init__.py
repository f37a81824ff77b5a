# Value objects
from .order_status import OrderStatus
from .customer_info import CustomerInfo
from .order_number import OrderNumber

__all__ = ['OrderStatus', 'CustomerInfo', 'OrderNumber']
