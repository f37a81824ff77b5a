"""
Cart aggregate.

The cart has no server-side identity: it is the in-session list of lines a
shopper intends to buy plus one view-state flag. Every operation is a
synchronous in-place transformation that cannot fail.
"""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, List, Optional

from ..exceptions import InvalidCartSnapshotError
from ..value_objects.line_key import ANY, LineKey
from .cart_line_item import CartItemCandidate, CartLineItem


@dataclass
class Cart:
    """Shopping cart with ordered, key-unique lines."""
    items: List[CartLineItem] = field(default_factory=list)
    # Transient UI flag (drawer visibility). Persisted with the items but
    # never consulted by any item operation.
    is_open: bool = False

    def add_item(self, candidate: CartItemCandidate) -> CartLineItem:
        """Add one unit of the candidate's line and surface the cart."""
        line = self._find(candidate.key)
        if line is not None:
            line.quantity += 1
        else:
            line = CartLineItem.from_candidate(candidate)
            self.items.append(line)
        self.is_open = True
        return line

    def remove_item(self, product_id: str, size: str, custom_name=ANY, custom_number=ANY) -> int:
        """
        Drop matching lines and return how many were removed.

        Without customization arguments every line of ``product_id`` in
        ``size`` goes, personalized or not.
        """
        kept = [
            item for item in self.items
            if not item.key.matches(product_id, size, custom_name, custom_number)
        ]
        removed = len(self.items) - len(kept)
        self.items = kept
        return removed

    def decrement_item(self, product_id: str, size: str, custom_name=ANY, custom_number=ANY) -> int:
        """
        Take one unit off each matching line; lines at one unit are removed.

        Returns the number of lines touched.
        """
        touched = 0
        kept = []
        for item in self.items:
            if item.key.matches(product_id, size, custom_name, custom_number):
                touched += 1
                if item.quantity <= 1:
                    continue
                item.quantity -= 1
            kept.append(item)
        self.items = kept
        return touched

    def clear(self) -> None:
        self.items = []

    def toggle(self) -> None:
        self.is_open = not self.is_open

    def open(self) -> None:
        self.is_open = True

    def close(self) -> None:
        self.is_open = False

    def _find(self, key: LineKey) -> Optional[CartLineItem]:
        for item in self.items:
            if item.key == key:
                return item
        return None

    @property
    def total(self) -> Decimal:
        """Sum of unit price times quantity, recomputed on every read."""
        return sum((item.subtotal for item in self.items), Decimal('0'))

    @property
    def item_count(self) -> int:
        return sum(item.quantity for item in self.items)

    @property
    def is_empty(self) -> bool:
        return not self.items

    def to_snapshot(self) -> Dict[str, Any]:
        return {
            'items': [item.to_dict() for item in self.items],
            'is_open': self.is_open,
        }

    @classmethod
    def from_snapshot(cls, snapshot: Dict[str, Any]) -> 'Cart':
        """
        Rebuild a cart from a stored snapshot.

        Anything but a literal ``True`` for ``is_open`` restores closed. Duplicate keys are folded
        into the first occurrence so the uniqueness invariant survives a
        hand-edited or concurrently written snapshot.
        """
        if not isinstance(snapshot, dict):
            raise InvalidCartSnapshotError(f"expected an object, got {type(snapshot).__name__}")
        raw_items = snapshot.get('items', [])
        if not isinstance(raw_items, list):
            raise InvalidCartSnapshotError("'items' must be a list")

        cart = cls(is_open=snapshot.get('is_open') is True)
        for raw in raw_items:
            item = CartLineItem.from_dict(raw)
            existing = cart._find(item.key)
            if existing is not None:
                existing.quantity += item.quantity
            else:
                cart.items.append(item)
        return cart
