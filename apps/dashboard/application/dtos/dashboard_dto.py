"""
Dashboard DTOs.
"""
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Dict, Optional
from uuid import UUID

from ...domain.entities.system_event import SystemEvent


@dataclass
class RecordEventDTO:
    """DTO for recording an activity feed entry."""
    event_type: str
    message: str
    metadata: Optional[Dict[str, Any]] = None


@dataclass
class SystemEventDTO:
    """DTO for activity feed output."""
    id: UUID
    type: str
    message: str
    metadata: Optional[Dict[str, Any]]
    created_at: datetime

    @classmethod
    def from_entity(cls, event: SystemEvent) -> 'SystemEventDTO':
        return cls(
            id=event.id,
            type=event.event_type,
            message=event.message,
            metadata=event.metadata,
            created_at=event.created_at,
        )


@dataclass
class DailyRevenueDTO:
    """Revenue for one calendar day; ``label`` is the chart axis text, e.g. ``Oct 19``."""
    date: date
    label: str
    revenue: Decimal


@dataclass
class SystemStatusDTO:
    """Row counts and database size for the dashboard header."""
    product_count: int
    order_count: int
    event_count: int
    storage_bytes: Optional[int]
