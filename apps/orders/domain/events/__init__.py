# Domain events
from .order_placed import OrderPlaced
from .order_status_changed import OrderStatusChanged

__all__ = ['OrderPlaced', 'OrderStatusChanged']
