# Shared interfaces module
from .exception_handlers import custom_exception_handler
from .pagination import StandardPagination, CatalogPagination

__all__ = ['custom_exception_handler', 'StandardPagination', 'CatalogPagination']
