"""
Cache-backed implementation of CartSnapshotRepository.
"""
from typing import Optional

from django.conf import settings
from django_redis.exceptions import ConnectionInterrupted

from shared.infrastructure.cache import FOREVER, JsonCache
from ...domain.exceptions import CartStorageUnavailableError
from ...domain.repositories.cart_snapshot_repository import CartSnapshotRepository, Snapshot

# Redis outages surface as ConnectionInterrupted; other backends raise socket errors.
UNREACHABLE_ERRORS = (ConnectionInterrupted, OSError)


class CacheCartSnapshotRepository(CartSnapshotRepository):
    """Stores snapshots under ``cart:<owner>:<key>`` in the configured cache (Redis in production)."""

    def __init__(self, owner: str, cache: Optional[JsonCache] = None, timeout: Optional[int] = FOREVER):
        self.cache = cache or JsonCache(
            prefix=f"cart:{owner}",
            alias=getattr(settings, 'CART_CACHE_ALIAS', 'default'),
        )
        self.timeout = timeout

    def load(self, key: str) -> Optional[Snapshot]:
        try:
            return self.cache.get(key)
        except UNREACHABLE_ERRORS as e:
            raise CartStorageUnavailableError(f"cache read failed for '{key}'") from e

    def save(self, key: str, snapshot: Snapshot) -> None:
        try:
            self.cache.set(key, snapshot, timeout=self.timeout)
        except UNREACHABLE_ERRORS as e:
            raise CartStorageUnavailableError(f"cache write failed for '{key}'") from e

    def delete(self, key: str) -> None:
        try:
            self.cache.delete(key)
        except UNREACHABLE_ERRORS as e:
            raise CartStorageUnavailableError(f"cache delete failed for '{key}'") from e
