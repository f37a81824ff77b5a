"""
Line identity value object.
"""
from dataclasses import dataclass
from typing import Optional

from shared.domain import ValueObject


class _AnyValue:
    """Wildcard for optional key parts the caller did not specify."""

    def __repr__(self) -> str:
        return 'ANY'


ANY = _AnyValue()


@dataclass(frozen=True)
class LineKey(ValueObject):
    """
    Identity of a cart line.

    Two lines are the same line iff all four parts are equal. ``None`` (no
    personalization) is a distinct value from every string, including ``""``.
    """
    product_id: str
    size: str
    custom_name: Optional[str] = None
    custom_number: Optional[str] = None

    def matches(self, product_id: str, size: str, custom_name=ANY, custom_number=ANY) -> bool:
        """
        Match against a removal target.

        ``product_id`` and ``size`` always take part; customization parts
        only when passed explicitly (``None`` included).
        """
        if self.product_id != product_id or self.size != size:
            return False
        if custom_name is not ANY and self.custom_name != custom_name:
            return False
        if custom_number is not ANY and self.custom_number != custom_number:
            return False
        return True
