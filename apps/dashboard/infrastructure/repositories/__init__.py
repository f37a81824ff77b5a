# Repository implementations
from .django_system_event_repository import DjangoSystemEventRepository

__all__ = ['DjangoSystemEventRepository']
