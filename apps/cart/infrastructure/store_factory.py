"""
Wires a CartStore to the persistence backend chosen in settings.
"""
import logging

from django.conf import settings

from ..application.cart_store import CartStore, DEFAULT_STORAGE_KEY
from ..domain.repositories.cart_snapshot_repository import CartSnapshotRepository
from .repositories import (
    CacheCartSnapshotRepository,
    InMemoryCartSnapshotRepository,
    NullCartSnapshotRepository,
    SessionCartSnapshotRepository,
)

logger = logging.getLogger(__name__)

# Process-wide fallback for CART_STORAGE_BACKEND = "memory".
_memory_repository = InMemoryCartSnapshotRepository()


def _session_key(request) -> str:
    session = request.session
    if session.session_key is None:
        session.save()
    return session.session_key


def build_snapshot_repository(request) -> CartSnapshotRepository:
    """Pick the persistence adapter for this request's session."""
    backend = getattr(settings, 'CART_STORAGE_BACKEND', 'session')
    session = getattr(request, 'session', None)

    if backend == 'null':
        return NullCartSnapshotRepository()
    if session is None:
        logger.warning("No session on request, cart will not persist")
        return NullCartSnapshotRepository()
    if backend == 'session':
        return SessionCartSnapshotRepository(session)
    if backend == 'cache':
        return CacheCartSnapshotRepository(
            owner=_session_key(request),
            timeout=getattr(settings, 'CART_CACHE_TIMEOUT', None),
        )
    if backend == 'memory':
        return _memory_repository

    logger.error(f"Unknown CART_STORAGE_BACKEND '{backend}', cart will not persist")
    return NullCartSnapshotRepository()


def get_cart_store(request) -> CartStore:
    """Return the request's cart store, building it on first use."""
    store = getattr(request, '_cart_store', None)
    if store is None:
        storage_key = getattr(settings, 'CART_STORAGE_KEY', DEFAULT_STORAGE_KEY)
        memory_backend = getattr(settings, 'CART_STORAGE_BACKEND', 'session') == 'memory'
        if memory_backend and getattr(request, 'session', None) is not None:
            storage_key = f"{_session_key(request)}:{storage_key}"
        store = CartStore(build_snapshot_repository(request), storage_key=storage_key)
        request._cart_store = store
    return store
