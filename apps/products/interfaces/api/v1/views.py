"""
Products API v1 views.
"""
import logging
from uuid import UUID

from drf_spectacular.utils import extend_schema, OpenApiParameter
from rest_framework import status
from rest_framework.permissions import AllowAny, IsAdminUser
from rest_framework.response import Response
from rest_framework.views import APIView

from shared.interfaces.pagination import CatalogPagination
from ....application.dtos.product_dto import ProductDTO
from ....domain.entities.product import Product
from ....domain.exceptions import ProductNotFoundError
from ....infrastructure.repositories import DjangoProductRepository
from ...serializers.product_serializer import ProductSerializer, ProductWriteSerializer

logger = logging.getLogger(__name__)


class CatalogPermissionMixin:
    """Anyone may browse; only staff may change the catalog."""

    def get_permissions(self):
        if self.request.method == 'GET':
            return [AllowAny()]
        return [IsAdminUser()]


@extend_schema(tags=['Products'])
class ProductListCreateView(CatalogPermissionMixin, APIView):
    """Product list and create endpoint."""

    @extend_schema(
        parameters=[
            OpenApiParameter(name='category', type=str, required=False),
            OpenApiParameter(name='team', type=str, required=False),
            OpenApiParameter(name='featured', type=bool, required=False),
            OpenApiParameter(name='order', type=str, required=False, enum=['asc', 'desc']),
            OpenApiParameter(name='page', type=int, required=False),
            OpenApiParameter(name='page_size', type=int, required=False),
        ],
        summary="List products",
    )
    def get(self, request):
        repository = DjangoProductRepository()
        pagination = CatalogPagination(request)

        filters = {
            'category': request.query_params.get('category') or None,
            'team': request.query_params.get('team') or None,
            'featured': True if request.query_params.get('featured') == 'true' else None,
        }
        order = 'asc' if request.query_params.get('order') == 'asc' else 'desc'

        products = repository.find_all(
            order=order,
            offset=pagination.offset,
            limit=pagination.size,
            **filters,
        )
        total = repository.count(**filters)

        serializer = ProductSerializer([ProductDTO.from_entity(p) for p in products], many=True)
        return pagination.get_paginated_response(serializer.data, total)

    @extend_schema(
        request=ProductWriteSerializer,
        responses={201: ProductSerializer},
        summary="Create a product",
    )
    def post(self, request):
        serializer = ProductWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        product = Product.create(**serializer.validated_data)
        saved = DjangoProductRepository().save(product)
        logger.info(f"Created product: {saved.name} ({saved.id})")

        output = ProductSerializer(ProductDTO.from_entity(saved))
        return Response(output.data, status=status.HTTP_201_CREATED)


@extend_schema(tags=['Products'])
class ProductDetailView(CatalogPermissionMixin, APIView):
    """Product detail endpoint."""

    @extend_schema(
        responses={200: ProductSerializer},
        summary="Get product detail",
    )
    def get(self, request, product_id: UUID):
        product = DjangoProductRepository().find_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(str(product_id))

        serializer = ProductSerializer(ProductDTO.from_entity(product))
        return Response(serializer.data)

    @extend_schema(
        request=ProductWriteSerializer,
        responses={200: ProductSerializer},
        summary="Replace a product",
    )
    def put(self, request, product_id: UUID):
        repository = DjangoProductRepository()
        product = repository.find_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(str(product_id))

        serializer = ProductWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        product.update_info(**serializer.validated_data)
        saved = repository.save(product)

        output = ProductSerializer(ProductDTO.from_entity(saved))
        return Response(output.data)

    @extend_schema(summary="Delete a product")
    def delete(self, request, product_id: UUID):
        deleted = DjangoProductRepository().delete(product_id)
        if not deleted:
            raise ProductNotFoundError(str(product_id))
        return Response(status=status.HTTP_204_NO_CONTENT)
