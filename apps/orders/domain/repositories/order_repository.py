"""
Order repository interface.
"""
from abc import ABC, abstractmethod
from datetime import date
from decimal import Decimal
from typing import Dict, List, Optional
from uuid import UUID

from ..entities.order import Order


class OrderRepository(ABC):
    """Abstract repository for Order aggregate."""

    @abstractmethod
    def save(self, order: Order) -> Order:
        """Persist an order and its items atomically."""

    @abstractmethod
    def find_by_id(self, order_id: UUID) -> Optional[Order]:
        """Find an order by ID."""

    @abstractmethod
    def find_by_customer_email(self, email: str, offset: int = 0, limit: int = 50) -> List[Order]:
        """Orders placed with ``email``, newest first."""

    @abstractmethod
    def count(self) -> int:
        """Number of orders ever placed."""

    @abstractmethod
    def revenue_by_day(self, since: date) -> Dict[date, Decimal]:
        """Summed totals of non-cancelled orders per calendar day from ``since`` on."""
