"""
System event repository interface.
"""
from abc import ABC, abstractmethod
from typing import List

from ..entities.system_event import SystemEvent


class SystemEventRepository(ABC):
    """Abstract repository for the activity feed."""

    @abstractmethod
    def save(self, event: SystemEvent) -> SystemEvent:
        """Append an event."""

    @abstractmethod
    def find_latest(self, limit: int = 50) -> List[SystemEvent]:
        """Most recent events first."""

    @abstractmethod
    def count(self) -> int:
        """Number of stored events."""

    @abstractmethod
    def clear(self) -> int:
        """Delete every event; returns how many were removed."""
