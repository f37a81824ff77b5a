"""
Django session implementation of CartSnapshotRepository.
"""
import copy
from typing import Optional

from ...domain.repositories.cart_snapshot_repository import CartSnapshotRepository, Snapshot


class SessionCartSnapshotRepository(CartSnapshotRepository):
    """Keeps the snapshot in the shopper's session, the server-side twin of browser storage."""

    def __init__(self, session):
        self.session = session

    def load(self, key: str) -> Optional[Snapshot]:
        snapshot = self.session.get(key)
        return copy.deepcopy(snapshot) if snapshot is not None else None

    def save(self, key: str, snapshot: Snapshot) -> None:
        self.session[key] = copy.deepcopy(snapshot)
        self.session.modified = True

    def delete(self, key: str) -> None:
        if key in self.session:
            del self.session[key]
            self.session.modified = True
