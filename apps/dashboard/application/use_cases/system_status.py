"""
System status use case.
"""
from dataclasses import dataclass
from typing import Callable, Optional

from shared.application import UseCase, UseCaseResult
from apps.orders.domain.repositories.order_repository import OrderRepository
from apps.products.domain.repositories.product_repository import ProductRepository
from ...domain.repositories.system_event_repository import SystemEventRepository
from ..dtos.dashboard_dto import SystemStatusDTO


@dataclass
class SystemStatusUseCase(UseCase[None, SystemStatusDTO]):
    """Counts of catalog rows, orders and feed entries plus database size."""

    product_repository: ProductRepository
    order_repository: OrderRepository
    event_repository: SystemEventRepository
    measure_storage: Callable[[], Optional[int]] = lambda: None

    def execute(self, input_dto: None = None) -> UseCaseResult[SystemStatusDTO]:
        return UseCaseResult.ok(SystemStatusDTO(
            product_count=self.product_repository.count(),
            order_count=self.order_repository.count(),
            event_count=self.event_repository.count(),
            storage_bytes=self.measure_storage(),
        ))
