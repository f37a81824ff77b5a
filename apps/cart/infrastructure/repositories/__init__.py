# Repository implementations
from .session_cart_snapshot_repository import SessionCartSnapshotRepository
from .cache_cart_snapshot_repository import CacheCartSnapshotRepository
from .in_memory_cart_snapshot_repository import (
    InMemoryCartSnapshotRepository,
    NullCartSnapshotRepository,
)

__all__ = [
    'SessionCartSnapshotRepository',
    'CacheCartSnapshotRepository',
    'InMemoryCartSnapshotRepository',
    'NullCartSnapshotRepository',
]
