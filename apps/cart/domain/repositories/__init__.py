# Repository interfaces
from .cart_snapshot_repository import CartSnapshotRepository, Snapshot

__all__ = ['CartSnapshotRepository', 'Snapshot']
