"""
Product domain exceptions.
"""
from shared.domain.exceptions import EntityNotFoundError, ValidationError


class InvalidProductError(ValidationError):
    """Raised when product data is invalid."""

    def __init__(self, message: str, field: str = "product"):
        super().__init__(message=message, field=field)


class ProductNotFoundError(EntityNotFoundError):
    """Raised when a product is not found."""

    def __init__(self, identifier: str):
        super().__init__(entity_name="Product", entity_id=identifier, code="PRODUCT_NOT_FOUND")
        self.identifier = identifier


class InvalidSizeError(ValidationError):
    """Raised when a size is not offered for a product."""

    def __init__(self, size: str, available):
        super().__init__(
            message=f"Size '{size}' is not available (choose from {', '.join(available)})",
            field="size",
        )
        self.size = size
        self.available = list(available)


__all__ = [
    'InvalidProductError',
    'ProductNotFoundError',
    'InvalidSizeError',
]
