"""
Order number value object.
"""
import secrets
import string
from dataclasses import dataclass
from datetime import datetime

from shared.domain import ValueObject

_ALPHABET = string.ascii_uppercase + string.digits


@dataclass(frozen=True)
class OrderNumber(ValueObject):
    """Human-facing order reference, e.g. ``ORD-20261019-7K2QX9``."""
    value: str

    @classmethod
    def generate(cls) -> 'OrderNumber':
        date_part = datetime.now().strftime("%Y%m%d")
        random_part = ''.join(secrets.choice(_ALPHABET) for _ in range(6))
        return cls(value=f"ORD-{date_part}-{random_part}")

    def __str__(self) -> str:
        return self.value
