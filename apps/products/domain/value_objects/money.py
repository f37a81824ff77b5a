"""
Money value object.
"""
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from shared.domain import ValueObject

DEFAULT_CURRENCY = "INR"


@dataclass(frozen=True)
class Money(ValueObject):
    """Amount with currency; the amount is always a finite Decimal."""
    amount: Decimal
    currency: str = DEFAULT_CURRENCY

    def __post_init__(self):
        if not isinstance(self.amount, Decimal):
            try:
                object.__setattr__(self, 'amount', Decimal(str(self.amount)))
            except InvalidOperation:
                raise ValueError(f"Not a number: {self.amount!r}")
        if not self.amount.is_finite():
            raise ValueError(f"Amount must be finite, got {self.amount}")

    @property
    def formatted(self) -> str:
        if self.currency == "INR":
            return f"₹{self.amount:,.2f}"
        return f"{self.currency} {self.amount:,.2f}"
