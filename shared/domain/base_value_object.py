"""
Base value object class for DDD.
"""
from abc import ABC
from dataclasses import astuple, dataclass


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Immutable value compared by its fields.

    Subclasses are frozen dataclasses, so equality and hashing come from the
    generated methods; ``as_tuple`` exposes the fields in declaration order.
    """

    def as_tuple(self) -> tuple:
        return astuple(self)
