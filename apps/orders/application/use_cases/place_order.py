"""
Place order use case.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from shared.application import UseCase, UseCaseResult
from apps.cart.application.cart_store import CartStore
from ...domain.entities.order import Order
from ...domain.exceptions import EmptyCartError
from ...domain.repositories.order_repository import OrderRepository
from ...infrastructure.notifications.order_confirmation import OrderConfirmationNotifier
from ..dtos.order_dto import OrderDTO, PlaceOrderDTO

logger = logging.getLogger(__name__)


@dataclass
class PlaceOrderUseCase(UseCase[PlaceOrderDTO, OrderDTO]):
    """
    Turn the session cart into an order.

    The cart is cleared only after the order has been saved. A failing
    save propagates and leaves the cart exactly as it was.
    """

    order_repository: OrderRepository
    cart_store: CartStore
    notifier: Optional[OrderConfirmationNotifier] = None

    def execute(self, input_dto: PlaceOrderDTO) -> UseCaseResult[OrderDTO]:
        if self.cart_store.is_empty:
            raise EmptyCartError()

        order = Order.create_from_cart(self.cart_store.items, input_dto.customer)
        saved = self.order_repository.save(order)
        for event in order.clear_domain_events():
            logger.info(f"{event.event_type}: order {saved.order_number} total {saved.total}")

        if self.notifier is not None and saved.customer.email:
            self.notifier.send_confirmation(saved)

        self.cart_store.clear_cart()
        return UseCaseResult.ok(OrderDTO.from_entity(saved))
