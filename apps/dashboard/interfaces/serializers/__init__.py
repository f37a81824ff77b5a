# Serializers
from .dashboard_serializer import (
    DailyRevenueSerializer,
    SystemEventCreateSerializer,
    SystemEventSerializer,
    SystemStatusSerializer,
)

__all__ = [
    'DailyRevenueSerializer',
    'SystemEventCreateSerializer',
    'SystemEventSerializer',
    'SystemStatusSerializer',
]
