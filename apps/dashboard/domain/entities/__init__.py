# Domain entities
from .system_event import SystemEvent

__all__ = ['SystemEvent']
