"""
Product repository interface.
"""
from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from ..entities.product import Product


class ProductRepository(ABC):
    """Abstract repository for Product aggregate."""

    @abstractmethod
    def save(self, product: Product) -> Product:
        """Save a product."""

    @abstractmethod
    def find_by_id(self, product_id: UUID) -> Optional[Product]:
        """Find a product by ID."""

    @abstractmethod
    def find_all(
        self,
        category: Optional[str] = None,
        team: Optional[str] = None,
        featured: Optional[bool] = None,
        order: str = 'desc',
        offset: int = 0,
        limit: int = 20,
    ) -> List[Product]:
        """List products, newest first unless ``order='asc'``."""

    @abstractmethod
    def count(
        self,
        category: Optional[str] = None,
        team: Optional[str] = None,
        featured: Optional[bool] = None,
    ) -> int:
        """Count products matching the same filters as ``find_all``."""

    @abstractmethod
    def delete(self, product_id: UUID) -> bool:
        """Delete a product."""
