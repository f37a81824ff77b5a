"""
Product updated domain event.
"""
from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID

from shared.domain import DomainEvent


@dataclass(frozen=True)
class ProductUpdated(DomainEvent):
    """Event raised when catalog data changes. Carts keep the price they copied."""
    product_id: UUID
    name: str
    price: Decimal
