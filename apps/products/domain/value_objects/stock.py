"""
Stock value object.
"""
from dataclasses import dataclass

from shared.domain import ValueObject

DEFAULT_STOCK = 10


@dataclass(frozen=True)
class Stock(ValueObject):
    """Units on hand; never negative."""
    quantity: int

    def __post_init__(self):
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise ValueError(f"Stock must be an integer, got {self.quantity!r}")
        if self.quantity < 0:
            raise ValueError("Stock quantity cannot be negative")

    @property
    def is_available(self) -> bool:
        return self.quantity > 0
