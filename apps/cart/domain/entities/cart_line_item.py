"""
Cart line item.
"""
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Optional

from ..exceptions import InvalidCartSnapshotError
from ..value_objects.line_key import LineKey


@dataclass(frozen=True)
class CartItemCandidate:
    """
    What a product page hands to ``add_item``: a line without a quantity.

    Display fields are copied from the catalog at add-time and never
    refreshed, so a later price change does not touch lines already in a
    cart. Nothing here is validated.
    """
    product_id: str
    name: str
    unit_price: Decimal
    image: str
    team: str
    size: str
    custom_name: Optional[str] = None
    custom_number: Optional[str] = None

    @property
    def key(self) -> LineKey:
        return LineKey(
            product_id=self.product_id,
            size=self.size,
            custom_name=self.custom_name,
            custom_number=self.custom_number,
        )


@dataclass
class CartLineItem:
    """One distinct row in the cart."""
    product_id: str
    name: str
    unit_price: Decimal
    image: str
    team: str
    size: str
    custom_name: Optional[str] = None
    custom_number: Optional[str] = None
    quantity: int = 1

    @classmethod
    def from_candidate(cls, candidate: CartItemCandidate) -> 'CartLineItem':
        return cls(
            product_id=candidate.product_id,
            name=candidate.name,
            unit_price=candidate.unit_price,
            image=candidate.image,
            team=candidate.team,
            size=candidate.size,
            custom_name=candidate.custom_name,
            custom_number=candidate.custom_number,
            quantity=1,
        )

    @property
    def key(self) -> LineKey:
        return LineKey(
            product_id=self.product_id,
            size=self.size,
            custom_name=self.custom_name,
            custom_number=self.custom_number,
        )

    @property
    def subtotal(self) -> Decimal:
        return self.unit_price * self.quantity

    def to_dict(self) -> Dict[str, Any]:
        """Plain JSON-safe record; prices travel as strings to keep precision."""
        return {
            'product_id': self.product_id,
            'name': self.name,
            'unit_price': str(self.unit_price),
            'image': self.image,
            'team': self.team,
            'size': self.size,
            'custom_name': self.custom_name,
            'custom_number': self.custom_number,
            'quantity': self.quantity,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CartLineItem':
        try:
            item = cls(
                product_id=data['product_id'],
                name=data['name'],
                unit_price=Decimal(str(data['unit_price'])),
                image=data.get('image', ''),
                team=data.get('team', ''),
                size=data['size'],
                custom_name=data.get('custom_name'),
                custom_number=data.get('custom_number'),
                quantity=int(data['quantity']),
            )
        except (KeyError, TypeError, ValueError, InvalidOperation, AttributeError) as e:
            raise InvalidCartSnapshotError(f"bad line item {data!r}: {e}") from e
        if item.quantity < 1:
            raise InvalidCartSnapshotError(f"non-positive quantity for {item.key}")
        return item
