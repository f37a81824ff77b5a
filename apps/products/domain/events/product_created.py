"""
Product created domain event.
"""
from dataclasses import dataclass
from uuid import UUID

from shared.domain import DomainEvent


@dataclass(frozen=True)
class ProductCreated(DomainEvent):
    """Event raised when a jersey is added to the catalog."""
    product_id: UUID
    name: str
    team: str
