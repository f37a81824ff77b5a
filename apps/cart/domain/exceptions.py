"""
Cart domain exceptions.

None of these escape ``CartStore``; they exist so the restore path can tell
a corrupt snapshot apart from an unavailable medium.
"""
from shared.domain.exceptions import ValidationError


class InvalidCartSnapshotError(ValidationError):
    """Raised when a persisted snapshot cannot be turned back into a cart."""

    def __init__(self, reason: str):
        super().__init__(message=f"Invalid cart snapshot: {reason}", field="snapshot")
        self.reason = reason


class CartStorageUnavailableError(Exception):
    """Raised by a persistence adapter whose durable medium cannot be reached."""
