"""
System event entity.
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional

from shared.domain import BaseEntity
from ..exceptions import InvalidSystemEventError


@dataclass(eq=False)
class SystemEvent(BaseEntity):
    """A line in the admin activity feed, e.g. ``PRODUCT_ADDED: Home Kit 24/25``."""
    event_type: str
    message: str
    metadata: Optional[Dict[str, Any]] = None

    @classmethod
    def create(cls, event_type: str, message: str, metadata: Optional[Dict[str, Any]] = None) -> 'SystemEvent':
        """Factory method to record a new event."""
        if not isinstance(event_type, str) or not event_type.strip():
            raise InvalidSystemEventError("Event type is required", field="type")
        if not isinstance(message, str) or not message.strip():
            raise InvalidSystemEventError("Event message is required", field="message")
        return cls(event_type=event_type.strip(), message=message.strip(), metadata=metadata or None)
