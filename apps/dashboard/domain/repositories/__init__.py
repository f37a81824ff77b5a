# Repository interfaces
from .system_event_repository import SystemEventRepository

__all__ = ['SystemEventRepository']
