"""
Cart snapshot repository interface.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

Snapshot = Dict[str, Any]


class CartSnapshotRepository(ABC):
    """
    Durable key/value slot for cart snapshots.

    Each save overwrites the whole snapshot; there is no merge, so the last
    writer wins when two views of one session write concurrently.
    Implementations may raise on an unreachable medium; ``CartStore``
    absorbs those errors.
    """

    @abstractmethod
    def load(self, key: str) -> Optional[Snapshot]:
        """Return the stored snapshot, or None if there is none."""

    @abstractmethod
    def save(self, key: str, snapshot: Snapshot) -> None:
        """Overwrite the stored snapshot."""

    @abstractmethod
    def delete(self, key: str) -> None:
        """Forget the stored snapshot."""
