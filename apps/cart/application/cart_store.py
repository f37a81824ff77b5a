"""
Cart store: the session's single cart plus its persistence.
"""
import logging
from decimal import Decimal
from typing import List

from ..domain.entities.cart import Cart
from ..domain.entities.cart_line_item import CartItemCandidate, CartLineItem
from ..domain.repositories.cart_snapshot_repository import CartSnapshotRepository, Snapshot
from ..domain.value_objects.line_key import ANY

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "cart-storage"


class CartStore:
    """
    Owns one shopper session's cart.

    Build exactly one per session and hand it to whatever needs the cart.
    Construction restores the last persisted snapshot; every mutation writes
    the full snapshot back before returning. Storage problems are logged
    and otherwise ignored: the in-memory cart stays authoritative for the
    rest of the session and no public method raises.
    """

    def __init__(self, repository: CartSnapshotRepository, storage_key: str = DEFAULT_STORAGE_KEY):
        self.repository = repository
        self.storage_key = storage_key
        self._cart = self._restore()

    def _restore(self) -> Cart:
        try:
            snapshot = self.repository.load(self.storage_key)
        except Exception:
            logger.warning(f"Cart storage unavailable for '{self.storage_key}', starting empty", exc_info=True)
            return Cart()

        if snapshot is None:
            return Cart()

        try:
            return Cart.from_snapshot(snapshot)
        except Exception:
            logger.warning(f"Discarding unreadable cart snapshot '{self.storage_key}'", exc_info=True)
            return Cart()

    def _persist(self) -> None:
        try:
            self.repository.save(self.storage_key, self._cart.to_snapshot())
        except Exception:
            logger.warning(f"Failed to persist cart '{self.storage_key}', keeping in-memory state", exc_info=True)

    # Mutations

    def add_item(self, candidate: CartItemCandidate) -> CartLineItem:
        line = self._cart.add_item(candidate)
        self._persist()
        return line

    def remove_item(self, product_id: str, size: str, custom_name=ANY, custom_number=ANY) -> None:
        self._cart.remove_item(product_id, size, custom_name, custom_number)
        self._persist()

    def decrement_item(self, product_id: str, size: str, custom_name=ANY, custom_number=ANY) -> None:
        self._cart.decrement_item(product_id, size, custom_name, custom_number)
        self._persist()

    def clear_cart(self) -> None:
        self._cart.clear()
        self._persist()

    def toggle_cart(self) -> None:
        self._cart.toggle()
        self._persist()

    def open_cart(self) -> None:
        self._cart.open()
        self._persist()

    def close_cart(self) -> None:
        self._cart.close()
        self._persist()

    # Reads

    def total(self) -> Decimal:
        return self._cart.total

    @property
    def items(self) -> List[CartLineItem]:
        """Current lines in display order (a shallow copy of the list)."""
        return list(self._cart.items)

    @property
    def is_open(self) -> bool:
        return self._cart.is_open

    @property
    def item_count(self) -> int:
        return self._cart.item_count

    @property
    def is_empty(self) -> bool:
        return self._cart.is_empty

    def snapshot(self) -> Snapshot:
        return self._cart.to_snapshot()
