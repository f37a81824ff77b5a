"""
Order placed domain event.
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional
from uuid import UUID

from shared.domain import DomainEvent


@dataclass(frozen=True)
class OrderPlaced(DomainEvent):
    """Event raised when a cart has been turned into an order."""
    order_id: UUID
    order_number: str
    customer_email: Optional[str]
    total: Decimal
