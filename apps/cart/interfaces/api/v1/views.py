"""
Cart API v1 views.
"""
from uuid import UUID

from drf_spectacular.utils import extend_schema
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.products.domain.exceptions import ProductNotFoundError
from apps.products.infrastructure.repositories import DjangoProductRepository
from ....application.dtos.cart_dto import CartDTO
from ....domain.entities.cart_line_item import CartItemCandidate
from ....infrastructure.store_factory import get_cart_store
from ...serializers.cart_serializer import (
    CartSerializer,
    CartItemCreateSerializer,
    CartItemKeySerializer,
)


def cart_response(store) -> Response:
    return Response(CartSerializer(CartDTO.from_store(store)).data)


def match_kwargs(data) -> dict:
    """Line matcher arguments; customization only when the client sent it."""
    kwargs = {'product_id': data['product_id'], 'size': data['size']}
    for optional in ('custom_name', 'custom_number'):
        if optional in data:
            kwargs[optional] = data[optional]
    return kwargs


class CartAPIView(APIView):
    """Base for cart endpoints: anonymous shoppers, cart bound to the session."""
    permission_classes = [AllowAny]

    def get_store(self):
        return get_cart_store(self.request)


@extend_schema(tags=['Cart'])
class CartView(CartAPIView):
    """Cart endpoint."""

    @extend_schema(responses={200: CartSerializer}, summary="Get the session cart")
    def get(self, request):
        return cart_response(self.get_store())

    @extend_schema(responses={200: CartSerializer}, summary="Clear cart")
    def delete(self, request):
        store = self.get_store()
        store.clear_cart()
        return cart_response(store)


@extend_schema(tags=['Cart'])
class CartItemView(CartAPIView):
    """Add or remove cart lines."""

    @extend_schema(
        request=CartItemCreateSerializer,
        responses={200: CartSerializer},
        summary="Add one unit to the cart",
    )
    def post(self, request):
        serializer = CartItemCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        if serializer.is_self_describing:
            candidate = CartItemCandidate(
                product_id=data['product_id'],
                name=data['name'],
                unit_price=data['unit_price'],
                image=data['image'],
                team=data['team'],
                size=data['size'],
                custom_name=data.get('custom_name'),
                custom_number=data.get('custom_number'),
            )
        else:
            candidate = self._candidate_from_catalog(data)

        store = self.get_store()
        store.add_item(candidate)
        return cart_response(store)

    def _candidate_from_catalog(self, data) -> CartItemCandidate:
        try:
            product_id = UUID(data['product_id'])
        except ValueError:
            raise ProductNotFoundError(data['product_id'])

        product = DjangoProductRepository().find_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(data['product_id'])
        return product.to_cart_candidate(
            size=data['size'],
            custom_name=data.get('custom_name'),
            custom_number=data.get('custom_number'),
        )

    @extend_schema(
        request=CartItemKeySerializer,
        responses={200: CartSerializer},
        summary="Remove cart lines",
    )
    def delete(self, request):
        serializer = CartItemKeySerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        store = self.get_store()
        store.remove_item(**match_kwargs(serializer.validated_data))
        return cart_response(store)


@extend_schema(tags=['Cart'])
class CartItemDecrementView(CartAPIView):
    """Take one unit off matching lines."""

    @extend_schema(
        request=CartItemKeySerializer,
        responses={200: CartSerializer},
        summary="Decrement cart lines",
    )
    def post(self, request):
        serializer = CartItemKeySerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        store = self.get_store()
        store.decrement_item(**match_kwargs(serializer.validated_data))
        return cart_response(store)


class CartVisibilityView(CartAPIView):
    """Drawer open/close transitions; ``store_method`` names the CartStore method."""
    store_method = None

    @extend_schema(tags=['Cart'], request=None, responses={200: CartSerializer})
    def post(self, request):
        store = self.get_store()
        getattr(store, self.store_method)()
        return cart_response(store)


class CartToggleView(CartVisibilityView):
    store_method = 'toggle_cart'


class CartOpenView(CartVisibilityView):
    store_method = 'open_cart'


class CartCloseView(CartVisibilityView):
    store_method = 'close_cart'
