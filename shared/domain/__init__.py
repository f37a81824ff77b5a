# Shared domain module
from .base_entity import BaseEntity, AggregateRoot
from .base_value_object import ValueObject
from .domain_event import DomainEvent, utc_now
from .exceptions import (
    DomainException,
    EntityNotFoundError,
    ValidationError,
    BusinessRuleViolationError,
    InvalidOperationError,
)

__all__ = [
    'BaseEntity',
    'AggregateRoot',
    'ValueObject',
    'DomainEvent',
    'utc_now',
    'DomainException',
    'EntityNotFoundError',
    'ValidationError',
    'BusinessRuleViolationError',
    'InvalidOperationError',
]
