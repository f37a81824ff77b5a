# DTOs
from .order_dto import PlaceOrderDTO, OrderDTO, OrderItemDTO

__all__ = ['PlaceOrderDTO', 'OrderDTO', 'OrderItemDTO']
