"""
In-memory implementations of CartSnapshotRepository.
"""
import copy
from typing import Dict, Optional

from ...domain.repositories.cart_snapshot_repository import CartSnapshotRepository, Snapshot


class InMemoryCartSnapshotRepository(CartSnapshotRepository):
    """Dict-backed store; snapshots are deep-copied so callers cannot alias stored state."""

    def __init__(self) -> None:
        self._snapshots: Dict[str, Snapshot] = {}

    def load(self, key: str) -> Optional[Snapshot]:
        snapshot = self._snapshots.get(key)
        return copy.deepcopy(snapshot) if snapshot is not None else None

    def save(self, key: str, snapshot: Snapshot) -> None:
        self._snapshots[key] = copy.deepcopy(snapshot)

    def delete(self, key: str) -> None:
        self._snapshots.pop(key, None)


class NullCartSnapshotRepository(CartSnapshotRepository):
    """No durable medium: nothing is ever loaded and writes vanish."""

    def load(self, key: str) -> Optional[Snapshot]:
        return None

    def save(self, key: str, snapshot: Snapshot) -> None:
        pass

    def delete(self, key: str) -> None:
        pass
