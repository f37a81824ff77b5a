# DTOs
from .dashboard_dto import DailyRevenueDTO, RecordEventDTO, SystemEventDTO, SystemStatusDTO

__all__ = ['DailyRevenueDTO', 'RecordEventDTO', 'SystemEventDTO', 'SystemStatusDTO']
