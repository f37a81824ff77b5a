"""
Orders API v1 views.
"""
from uuid import UUID

from drf_spectacular.utils import extend_schema, OpenApiParameter
from rest_framework import status
from rest_framework.permissions import AllowAny, IsAdminUser
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.cart.infrastructure.store_factory import get_cart_store
from ....application.dtos.order_dto import OrderDTO, PlaceOrderDTO
from ....application.use_cases import ListCustomerOrdersUseCase, PlaceOrderUseCase
from ....domain.exceptions import OrderNotFoundError
from ....domain.value_objects.customer_info import CustomerInfo
from ....domain.value_objects.order_status import OrderStatus
from ....infrastructure.notifications import OrderConfirmationNotifier
from ....infrastructure.repositories import DjangoOrderRepository
from ...serializers.order_serializer import (
    CheckoutSerializer,
    OrderSerializer,
    OrderStatusUpdateSerializer,
)


@extend_schema(tags=['Orders'])
class OrderListCreateView(APIView):
    """Checkout and order history endpoint."""
    permission_classes = [AllowAny]

    @extend_schema(
        parameters=[OpenApiParameter(name='email', type=str, required=True)],
        responses={200: OrderSerializer(many=True)},
        summary="List orders placed with an email",
    )
    def get(self, request):
        use_case = ListCustomerOrdersUseCase(order_repository=DjangoOrderRepository())
        result = use_case.execute(request.query_params.get('email', ''))

        serializer = OrderSerializer(result.data, many=True)
        return Response(serializer.data)

    @extend_schema(
        request=CheckoutSerializer,
        responses={201: OrderSerializer},
        summary="Place an order from the session cart",
    )
    def post(self, request):
        serializer = CheckoutSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        use_case = PlaceOrderUseCase(
            order_repository=DjangoOrderRepository(),
            cart_store=get_cart_store(request),
            notifier=OrderConfirmationNotifier(),
        )
        input_dto = PlaceOrderDTO(customer=CustomerInfo.from_dict(serializer.validated_data['customer']))
        result = use_case.execute(input_dto)

        output_serializer = OrderSerializer(result.data)
        return Response(output_serializer.data, status=status.HTTP_201_CREATED)


@extend_schema(tags=['Orders'])
class OrderDetailView(APIView):
    """Order detail endpoint."""
    permission_classes = [AllowAny]

    @extend_schema(
        responses={200: OrderSerializer},
        summary="Get order detail",
    )
    def get(self, request, order_id: UUID):
        order = DjangoOrderRepository().find_by_id(order_id)
        if order is None:
            raise OrderNotFoundError(str(order_id))
        return Response(OrderSerializer(OrderDTO.from_entity(order)).data)


@extend_schema(tags=['Orders'])
class OrderStatusView(APIView):
    """Admin endpoint for shipping, delivering or cancelling an order."""
    permission_classes = [IsAdminUser]

    @extend_schema(
        request=OrderStatusUpdateSerializer,
        responses={200: OrderSerializer},
        summary="Change order status",
    )
    def patch(self, request, order_id: UUID):
        serializer = OrderStatusUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        repository = DjangoOrderRepository()
        order = repository.find_by_id(order_id)
        if order is None:
            raise OrderNotFoundError(str(order_id))

        order.transition_to(OrderStatus(serializer.validated_data['status']))
        saved = repository.save(order)
        return Response(OrderSerializer(OrderDTO.from_entity(saved)).data)
