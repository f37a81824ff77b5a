"""
Domain exceptions.
"""
from typing import Optional


class DomainException(Exception):
    """Base exception for domain layer."""

    def __init__(self, message: str, code: Optional[str] = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class EntityNotFoundError(DomainException):
    """Raised when an entity is not found."""

    def __init__(self, entity_name: str, entity_id: str, code: str = "ENTITY_NOT_FOUND"):
        super().__init__(
            message=f"{entity_name} '{entity_id}' not found",
            code=code,
        )
        self.entity_name = entity_name
        self.entity_id = entity_id


class ValidationError(DomainException):
    """Raised when validation fails."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message=message, code="VALIDATION_ERROR")
        self.field = field


class BusinessRuleViolationError(DomainException):
    """Raised when a business rule is violated."""

    def __init__(self, message: str, rule: Optional[str] = None, code: str = "BUSINESS_RULE_VIOLATION"):
        super().__init__(message=message, code=code)
        self.rule = rule


class InvalidOperationError(DomainException):
    """Raised when an operation is invalid for the current state."""

    def __init__(self, message: str, operation: Optional[str] = None, state: Optional[str] = None):
        super().__init__(message=message, code="INVALID_OPERATION")
        self.operation = operation
        self.state = state
