"""
Cart DTOs.
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import List, Optional

from ...domain.entities.cart_line_item import CartLineItem


@dataclass
class CartLineDTO:
    """DTO for one cart line."""
    product_id: str
    name: str
    unit_price: Decimal
    image: str
    team: str
    size: str
    custom_name: Optional[str]
    custom_number: Optional[str]
    quantity: int
    subtotal: Decimal

    @classmethod
    def from_entity(cls, item: CartLineItem) -> 'CartLineDTO':
        return cls(
            product_id=item.product_id,
            name=item.name,
            unit_price=item.unit_price,
            image=item.image,
            team=item.team,
            size=item.size,
            custom_name=item.custom_name,
            custom_number=item.custom_number,
            quantity=item.quantity,
            subtotal=item.subtotal,
        )


@dataclass
class CartDTO:
    """DTO for cart output."""
    items: List[CartLineDTO]
    is_open: bool
    total: Decimal
    item_count: int

    @classmethod
    def from_store(cls, store) -> 'CartDTO':
        return cls(
            items=[CartLineDTO.from_entity(item) for item in store.items],
            is_open=store.is_open,
            total=store.total(),
            item_count=store.item_count,
        )
