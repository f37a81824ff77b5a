# Django models
from .system_event_model import SystemEventModel

__all__ = ['SystemEventModel']
