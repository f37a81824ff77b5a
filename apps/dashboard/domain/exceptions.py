"""
Dashboard domain exceptions.
"""
from shared.domain.exceptions import ValidationError


class InvalidSystemEventError(ValidationError):
    """Raised when a system event is missing its type or message."""

    def __init__(self, message: str, field: str = "event"):
        super().__init__(message=message, field=field)


__all__ = ['InvalidSystemEventError']
