"""
Order entity (Aggregate Root).
"""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Iterable, List

from shared.domain import AggregateRoot
from apps.cart.domain.entities.cart_line_item import CartLineItem
from ..value_objects.customer_info import CustomerInfo
from ..value_objects.order_number import OrderNumber
from ..value_objects.order_status import OrderStatus
from ..events.order_placed import OrderPlaced
from ..events.order_status_changed import OrderStatusChanged
from ..exceptions import InvalidOrderStateError
from .order_item import OrderItem

_TRANSITIONS = {
    'ship': ({OrderStatus.PAID}, OrderStatus.SHIPPED),
    'deliver': ({OrderStatus.SHIPPED}, OrderStatus.DELIVERED),
    'cancel': ({OrderStatus.PENDING, OrderStatus.PAID}, OrderStatus.CANCELLED),
}


@dataclass(eq=False)
class Order(AggregateRoot):
    """
    A purchase recorded from a cart snapshot.

    Lines are copied at checkout; nothing done to the cart afterwards
    reaches the order.
    """
    order_number: OrderNumber
    customer: CustomerInfo
    items: List[OrderItem] = field(default_factory=list)
    status: OrderStatus = OrderStatus.PAID
    total: Decimal = Decimal('0')

    def __post_init__(self):
        self._calculate_total()

    def _calculate_total(self) -> None:
        self.total = sum((item.subtotal for item in self.items), Decimal('0'))

    @classmethod
    def create_from_cart(cls, lines: Iterable[CartLineItem], customer: CustomerInfo) -> 'Order':
        """Factory method: snapshot cart lines into a new paid order."""
        order = cls(order_number=OrderNumber.generate(), customer=customer)
        order.items = [OrderItem.from_cart_line(order.id, line) for line in lines]
        order._calculate_total()
        order.add_domain_event(
            OrderPlaced(
                order_id=order.id,
                order_number=order.order_number.value,
                customer_email=customer.email,
                total=order.total,
            )
        )
        return order

    def ship(self) -> None:
        self._apply('ship')

    def deliver(self) -> None:
        self._apply('deliver')

    def cancel(self) -> None:
        self._apply('cancel')

    def transition_to(self, status: OrderStatus) -> None:
        """Move to ``status`` through the matching named transition."""
        for operation, (_, target) in _TRANSITIONS.items():
            if target == status:
                self._apply(operation)
                return
        raise InvalidOrderStateError(f"move to {status.value}", self.status.value)

    def _apply(self, operation: str) -> None:
        allowed_from, new_status = _TRANSITIONS[operation]
        if self.status not in allowed_from:
            raise InvalidOrderStateError(operation, self.status.value)
        old_status = self.status
        self.status = new_status
        self.touch()
        self.add_domain_event(
            OrderStatusChanged(
                order_id=self.id,
                old_status=old_status.value,
                new_status=new_status.value,
            )
        )

    @property
    def is_cancellable(self) -> bool:
        return self.status in _TRANSITIONS['cancel'][0]

    @property
    def item_count(self) -> int:
        return sum(item.quantity for item in self.items)
