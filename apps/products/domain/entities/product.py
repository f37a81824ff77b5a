"""
Product entity (Aggregate Root).
"""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional

from shared.domain import AggregateRoot
from apps.cart.domain.entities.cart_line_item import CartItemCandidate
from ..value_objects.money import DEFAULT_CURRENCY, Money
from ..value_objects.stock import DEFAULT_STOCK, Stock
from ..events.product_created import ProductCreated
from ..events.product_updated import ProductUpdated
from ..exceptions import InvalidProductError, InvalidSizeError

DEFAULT_SIZES = ["S", "M", "L", "XL", "2XL"]
DEFAULT_CATEGORY = "General"


def parse_sizes(raw) -> List[str]:
    """Accept ``"S, M,L"`` or a list; blanks are dropped."""
    if raw is None:
        return list(DEFAULT_SIZES)
    parts = raw.split(',') if isinstance(raw, str) else raw
    return [str(part).strip() for part in parts if str(part).strip()]


@dataclass(eq=False)
class Product(AggregateRoot):
    """A jersey for sale."""
    name: str
    price: Money
    description: str = ""
    product_number: str = ""
    image: str = ""
    category: str = DEFAULT_CATEGORY
    team: str = ""
    sizes: List[str] = field(default_factory=lambda: list(DEFAULT_SIZES))
    stock: Stock = field(default_factory=lambda: Stock(quantity=DEFAULT_STOCK))
    featured: bool = False

    def __post_init__(self):
        self._validate()

    def _validate(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise InvalidProductError("Product name is required", field="name")
        self.name = self.name.strip()

    @classmethod
    def create(
        cls,
        name: str,
        price,
        description: str = "",
        product_number: str = "",
        image: str = "",
        category: str = DEFAULT_CATEGORY,
        team: str = "",
        sizes=None,
        stock: int = DEFAULT_STOCK,
        featured: bool = False,
        currency: str = DEFAULT_CURRENCY,
    ) -> 'Product':
        """Factory method to create a new product."""
        product = cls(
            name=name,
            price=cls._money(price, currency),
            description=description,
            product_number=product_number,
            image=image,
            category=category or DEFAULT_CATEGORY,
            team=team,
            sizes=parse_sizes(sizes),
            stock=cls._stock(stock),
            featured=featured,
        )
        product.add_domain_event(
            ProductCreated(product_id=product.id, name=product.name, team=product.team)
        )
        return product

    @staticmethod
    def _money(price, currency: str = DEFAULT_CURRENCY) -> Money:
        try:
            return Money(amount=price, currency=currency)
        except ValueError:
            raise InvalidProductError("Price must be a valid number", field="price")

    @staticmethod
    def _stock(quantity) -> Stock:
        try:
            return Stock(quantity=quantity)
        except ValueError:
            raise InvalidProductError("Stock must be a non-negative integer", field="stock")

    def update_info(
        self,
        name: Optional[str] = None,
        price=None,
        description: Optional[str] = None,
        product_number: Optional[str] = None,
        image: Optional[str] = None,
        category: Optional[str] = None,
        team: Optional[str] = None,
        sizes=None,
        stock: Optional[int] = None,
        featured: Optional[bool] = None,
    ) -> None:
        """Replace the given fields; ``None`` leaves a field as it is."""
        if name is not None:
            if not name.strip():
                raise InvalidProductError("Product name is required", field="name")
            self.name = name.strip()
        if price is not None:
            self.price = self._money(price, self.price.currency)
        if stock is not None:
            self.stock = self._stock(stock)
        if sizes is not None:
            self.sizes = parse_sizes(sizes)
        for attr, value in (
            ('description', description),
            ('product_number', product_number),
            ('image', image),
            ('category', category),
            ('team', team),
            ('featured', featured),
        ):
            if value is not None:
                setattr(self, attr, value)
        self.touch()
        self.add_domain_event(
            ProductUpdated(product_id=self.id, name=self.name, price=self.price.amount)
        )

    def to_cart_candidate(
        self,
        size: str,
        custom_name: Optional[str] = None,
        custom_number: Optional[str] = None,
    ) -> CartItemCandidate:
        """Copy display data into a cart candidate for one of the offered sizes."""
        if self.sizes and size not in self.sizes:
            raise InvalidSizeError(size, self.sizes)
        return CartItemCandidate(
            product_id=str(self.id),
            name=self.name,
            unit_price=self.price.amount,
            image=self.image,
            team=self.team,
            size=size,
            custom_name=custom_name,
            custom_number=custom_number,
        )

    @property
    def unit_price(self) -> Decimal:
        return self.price.amount

    @property
    def is_in_stock(self) -> bool:
        return self.stock.is_available
