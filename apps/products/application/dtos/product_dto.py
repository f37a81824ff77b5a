"""
Product DTOs.
"""
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import List
from uuid import UUID

from ...domain.entities.product import Product


@dataclass
class ProductDTO:
    """DTO for product output."""
    id: UUID
    product_number: str
    name: str
    description: str
    price: Decimal
    currency: str
    price_display: str
    image: str
    category: str
    team: str
    sizes: List[str]
    stock: int
    featured: bool
    is_in_stock: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, product: Product) -> 'ProductDTO':
        """Create DTO from entity."""
        return cls(
            id=product.id,
            product_number=product.product_number,
            name=product.name,
            description=product.description,
            price=product.price.amount,
            currency=product.price.currency,
            price_display=product.price.formatted,
            image=product.image,
            category=product.category,
            team=product.team,
            sizes=list(product.sizes),
            stock=product.stock.quantity,
            featured=product.featured,
            is_in_stock=product.is_in_stock,
            created_at=product.created_at,
            updated_at=product.updated_at,
        )
