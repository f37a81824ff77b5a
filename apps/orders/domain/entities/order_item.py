"""
Order item entity.
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional
from uuid import UUID

from shared.domain import BaseEntity
from apps.cart.domain.entities.cart_line_item import CartLineItem


@dataclass(eq=False)
class OrderItem(BaseEntity):
    """A cart line frozen into an order."""
    order_id: UUID
    product_id: str
    product_name: str
    size: str
    quantity: int
    unit_price: Decimal
    custom_name: Optional[str] = None
    custom_number: Optional[str] = None

    @classmethod
    def from_cart_line(cls, order_id: UUID, line: CartLineItem) -> 'OrderItem':
        return cls(
            order_id=order_id,
            product_id=line.product_id,
            product_name=line.name,
            size=line.size,
            quantity=line.quantity,
            unit_price=line.unit_price,
            custom_name=line.custom_name,
            custom_number=line.custom_number,
        )

    @property
    def subtotal(self) -> Decimal:
        return self.unit_price * self.quantity

    @property
    def is_customized(self) -> bool:
        return self.custom_name is not None or self.custom_number is not None
