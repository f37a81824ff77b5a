"""
Activity feed use cases.
"""
import logging
from dataclasses import dataclass
from typing import List

from shared.application import UseCase, UseCaseResult
from ...domain.entities.system_event import SystemEvent
from ...domain.repositories.system_event_repository import SystemEventRepository
from ..dtos.dashboard_dto import RecordEventDTO, SystemEventDTO

logger = logging.getLogger(__name__)

DEFAULT_EVENT_LIMIT = 50


@dataclass
class RecordSystemEventUseCase(UseCase[RecordEventDTO, SystemEventDTO]):
    """Append an entry to the activity feed."""

    event_repository: SystemEventRepository

    def execute(self, input_dto: RecordEventDTO) -> UseCaseResult[SystemEventDTO]:
        event = SystemEvent.create(
            event_type=input_dto.event_type,
            message=input_dto.message,
            metadata=input_dto.metadata,
        )
        saved = self.event_repository.save(event)
        return UseCaseResult.ok(SystemEventDTO.from_entity(saved))


@dataclass
class ListSystemEventsUseCase(UseCase[None, List[SystemEventDTO]]):
    """The newest entries, newest first."""

    event_repository: SystemEventRepository
    limit: int = DEFAULT_EVENT_LIMIT

    def execute(self, input_dto: None = None) -> UseCaseResult[List[SystemEventDTO]]:
        events = self.event_repository.find_latest(limit=self.limit)
        return UseCaseResult.ok([SystemEventDTO.from_entity(event) for event in events])


@dataclass
class ClearSystemEventsUseCase(UseCase[None, int]):
    """Empty the activity feed."""

    event_repository: SystemEventRepository

    def execute(self, input_dto: None = None) -> UseCaseResult[int]:
        deleted = self.event_repository.clear()
        logger.info(f"Cleared {deleted} system events")
        return UseCaseResult.ok(deleted)
