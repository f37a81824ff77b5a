"""
Customer info value object.
"""
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

from shared.domain import ValueObject


@dataclass(frozen=True)
class CustomerInfo(ValueObject):
    """Checkout contact and shipping details as typed by the shopper."""
    email: Optional[str] = None
    first_name: str = ""
    last_name: str = ""
    address: str = ""
    city: str = ""
    postal_code: str = ""

    @property
    def display_name(self) -> str:
        """Greeting name for emails."""
        return self.first_name or "Customer"

    @property
    def full_address(self) -> str:
        parts = [part for part in (self.address, self.city, self.postal_code) if part]
        return ", ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'CustomerInfo':
        data = data or {}
        return cls(
            email=data.get('email') or None,
            first_name=data.get('first_name', ''),
            last_name=data.get('last_name', ''),
            address=data.get('address', ''),
            city=data.get('city', ''),
            postal_code=data.get('postal_code', ''),
        )
