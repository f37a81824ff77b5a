"""
Base entity classes for DDD.
"""
from abc import ABC
from dataclasses import dataclass, field
from datetime import datetime
from typing import List
from uuid import UUID, uuid4

from .domain_event import DomainEvent, utc_now


@dataclass(eq=False, kw_only=True)
class BaseEntity(ABC):
    """Entity with a UUID identity; two entities are equal when their ids are."""
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BaseEntity):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def touch(self) -> None:
        """Bump updated_at."""
        self.updated_at = utc_now()


@dataclass(eq=False, kw_only=True)
class AggregateRoot(BaseEntity):
    """Entity that collects domain events until a use case drains them."""
    _domain_events: List[DomainEvent] = field(default_factory=list, repr=False)

    def add_domain_event(self, event: DomainEvent) -> None:
        self._domain_events.append(event)

    def clear_domain_events(self) -> List[DomainEvent]:
        """Drain and return pending events."""
        events = self._domain_events.copy()
        self._domain_events.clear()
        return events

    @property
    def domain_events(self) -> List[DomainEvent]:
        return self._domain_events.copy()
