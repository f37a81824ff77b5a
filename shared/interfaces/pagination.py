"""
Custom pagination classes.
"""
from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response


class StandardPagination(PageNumberPagination):
    """Page-number pagination; oversized page sizes are clamped, not rejected."""
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 50


class CatalogPagination:
    """
    Offset window for repository-backed lists.

    ``page`` is 1-based and floors at 1; ``page_size`` is clamped to
    ``1..max_page_size`` with ``page_size`` as the default.
    """
    page_size = StandardPagination.page_size
    max_page_size = StandardPagination.max_page_size

    def __init__(self, request):
        self.page = max(1, self._int_param(request, 'page', 1))
        requested = self._int_param(request, 'page_size', self.page_size)
        self.size = min(self.max_page_size, max(1, requested))

    @staticmethod
    def _int_param(request, name: str, default: int) -> int:
        try:
            return int(request.query_params.get(name, default))
        except (TypeError, ValueError):
            return default

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.size

    def get_paginated_response(self, items, total: int) -> Response:
        return Response({
            'items': items,
            'total': total,
            'page': self.page,
            'page_size': self.size,
        })
