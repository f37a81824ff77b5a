"""
Admin dashboard API v1 views.
"""
from django.conf import settings
from django.utils import timezone
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.permissions import IsAdminUser
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.orders.infrastructure.repositories import DjangoOrderRepository
from apps.products.infrastructure.repositories import DjangoProductRepository
from ....application.dtos.dashboard_dto import RecordEventDTO
from ....application.use_cases import (
    ClearSystemEventsUseCase,
    ListSystemEventsUseCase,
    RecordSystemEventUseCase,
    SalesSummaryUseCase,
    SystemStatusUseCase,
)
from ....infrastructure.repositories import DjangoSystemEventRepository
from ....infrastructure.storage_usage import database_size_bytes
from ...serializers.dashboard_serializer import (
    DailyRevenueSerializer,
    SystemEventCreateSerializer,
    SystemEventSerializer,
    SystemStatusSerializer,
)


@extend_schema(tags=['Dashboard'])
class SystemEventListView(APIView):
    """Activity feed: read, append, clear."""
    permission_classes = [IsAdminUser]

    @extend_schema(responses={200: SystemEventSerializer(many=True)}, summary="Latest system events")
    def get(self, request):
        use_case = ListSystemEventsUseCase(
            event_repository=DjangoSystemEventRepository(),
            limit=getattr(settings, 'DASHBOARD_EVENT_LIMIT', 50),
        )
        result = use_case.execute()
        return Response(SystemEventSerializer(result.data, many=True).data)

    @extend_schema(
        request=SystemEventCreateSerializer,
        responses={201: SystemEventSerializer},
        summary="Record a system event",
    )
    def post(self, request):
        serializer = SystemEventCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        use_case = RecordSystemEventUseCase(event_repository=DjangoSystemEventRepository())
        result = use_case.execute(RecordEventDTO(
            event_type=data['type'],
            message=data['message'],
            metadata=data.get('metadata'),
        ))
        return Response(SystemEventSerializer(result.data).data, status=status.HTTP_201_CREATED)

    @extend_schema(summary="Clear the activity feed")
    def delete(self, request):
        result = ClearSystemEventsUseCase(event_repository=DjangoSystemEventRepository()).execute()
        return Response({'success': True, 'deleted': result.data})


@extend_schema(tags=['Dashboard'])
class SalesStatsView(APIView):
    """Daily revenue chart data."""
    permission_classes = [IsAdminUser]

    @extend_schema(responses={200: DailyRevenueSerializer(many=True)}, summary="Revenue per day, last week")
    def get(self, request):
        use_case = SalesSummaryUseCase(
            order_repository=DjangoOrderRepository(),
            days=getattr(settings, 'DASHBOARD_SALES_DAYS', 7),
        )
        result = use_case.execute(timezone.localdate())
        return Response(DailyRevenueSerializer(result.data, many=True).data)


@extend_schema(tags=['Dashboard'])
class SystemStatusView(APIView):
    """Dashboard header counters."""
    permission_classes = [IsAdminUser]

    @extend_schema(responses={200: SystemStatusSerializer}, summary="Store counters")
    def get(self, request):
        use_case = SystemStatusUseCase(
            product_repository=DjangoProductRepository(),
            order_repository=DjangoOrderRepository(),
            event_repository=DjangoSystemEventRepository(),
            measure_storage=database_size_bytes,
        )
        return Response(SystemStatusSerializer(use_case.execute().data).data)
