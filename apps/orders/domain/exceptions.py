"""
Order domain exceptions.
"""
from shared.domain.exceptions import (
    BusinessRuleViolationError,
    EntityNotFoundError,
    InvalidOperationError,
)


class OrderNotFoundError(EntityNotFoundError):
    """Raised when an order is not found."""

    def __init__(self, identifier: str):
        super().__init__(entity_name="Order", entity_id=identifier, code="ORDER_NOT_FOUND")
        self.identifier = identifier


class EmptyCartError(BusinessRuleViolationError):
    """Raised when trying to checkout an empty cart."""

    def __init__(self):
        super().__init__(
            message="Cannot checkout an empty cart",
            rule="cart_not_empty",
            code="EMPTY_CART",
        )


class InvalidOrderStateError(InvalidOperationError):
    """Raised when an order operation is invalid for the current state."""

    def __init__(self, operation: str, current_state: str):
        super().__init__(
            message=f"Cannot {operation} order in '{current_state}' state",
            operation=operation,
            state=current_state,
        )
