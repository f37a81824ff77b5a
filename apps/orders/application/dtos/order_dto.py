"""
Order DTOs.
"""
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from ...domain.entities.order import Order
from ...domain.entities.order_item import OrderItem
from ...domain.value_objects.customer_info import CustomerInfo


@dataclass
class PlaceOrderDTO:
    """DTO for checkout input."""
    customer: CustomerInfo


@dataclass
class OrderItemDTO:
    """DTO for order item output."""
    id: UUID
    product_id: str
    product_name: str
    size: str
    custom_name: Optional[str]
    custom_number: Optional[str]
    quantity: int
    unit_price: Decimal
    subtotal: Decimal

    @classmethod
    def from_entity(cls, item: OrderItem) -> 'OrderItemDTO':
        return cls(
            id=item.id,
            product_id=item.product_id,
            product_name=item.product_name,
            size=item.size,
            custom_name=item.custom_name,
            custom_number=item.custom_number,
            quantity=item.quantity,
            unit_price=item.unit_price,
            subtotal=item.subtotal,
        )


@dataclass
class OrderDTO:
    """DTO for order output."""
    id: UUID
    order_number: str
    status: str
    items: List[OrderItemDTO]
    total: Decimal
    item_count: int
    customer: dict
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, order: Order) -> 'OrderDTO':
        """Create DTO from entity."""
        return cls(
            id=order.id,
            order_number=order.order_number.value,
            status=order.status.value,
            items=[OrderItemDTO.from_entity(item) for item in order.items],
            total=order.total,
            item_count=order.item_count,
            customer=order.customer.to_dict(),
            created_at=order.created_at,
            updated_at=order.updated_at,
        )
