# Use cases
from .sales_summary import SalesSummaryUseCase
from .system_events import ClearSystemEventsUseCase, ListSystemEventsUseCase, RecordSystemEventUseCase
from .system_status import SystemStatusUseCase

__all__ = [
    'SalesSummaryUseCase',
    'ClearSystemEventsUseCase',
    'ListSystemEventsUseCase',
    'RecordSystemEventUseCase',
    'SystemStatusUseCase',
]
