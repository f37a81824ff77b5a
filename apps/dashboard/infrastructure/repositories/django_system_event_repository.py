"""
Django ORM implementation of SystemEventRepository.
"""
from typing import List

from ...domain.entities.system_event import SystemEvent
from ...domain.repositories.system_event_repository import SystemEventRepository
from ..models.system_event_model import SystemEventModel


class DjangoSystemEventRepository(SystemEventRepository):
    """Django ORM based system event repository implementation."""

    def save(self, event: SystemEvent) -> SystemEvent:
        model = SystemEventModel.objects.create(
            id=event.id,
            event_type=event.event_type,
            message=event.message,
            metadata=event.metadata,
        )
        return self._to_entity(model)

    def find_latest(self, limit: int = 50) -> List[SystemEvent]:
        queryset = SystemEventModel.objects.order_by('-created_at')[:limit]
        return [self._to_entity(model) for model in queryset]

    def count(self) -> int:
        return SystemEventModel.objects.count()

    def clear(self) -> int:
        deleted, _ = SystemEventModel.objects.all().delete()
        return deleted

    def _to_entity(self, model: SystemEventModel) -> SystemEvent:
        """Convert Django model to domain entity."""
        return SystemEvent(
            id=model.id,
            event_type=model.event_type,
            message=model.message,
            metadata=model.metadata,
            created_at=model.created_at,
            updated_at=model.created_at,
        )
