"""
Order confirmation email.
"""
import logging

from django.conf import settings
from django.core.mail import send_mail

from ...domain.entities.order import Order

logger = logging.getLogger(__name__)


class OrderConfirmationNotifier:
    """
    Mails the customer a summary of a placed order.

    Delivery is best effort: failures are logged and reported through the
    return value, never raised, so a mail outage cannot undo a checkout.
    """

    def __init__(self, from_email: str = None, store_name: str = None):
        self.from_email = from_email or getattr(settings, 'ORDER_EMAIL_FROM', settings.DEFAULT_FROM_EMAIL)
        self.store_name = store_name or getattr(settings, 'STORE_NAME', 'Jersey Store')

    def build_subject(self, order: Order) -> str:
        return f"Order Confirmation #{order.order_number.value}"

    def build_body(self, order: Order) -> str:
        lines = [
            f"Hi {order.customer.display_name},",
            "",
            "Thank you for your purchase! We're preparing your kit for dispatch.",
            "",
            "Order summary:",
        ]
        for item in order.items:
            label = f"{item.product_name} ({item.size})"
            if item.is_customized:
                label += f" - {item.custom_name or ''} {item.custom_number or ''}".rstrip()
            lines.append(f"  {label}  Qty: {item.quantity}  @ {item.unit_price:.2f}")
        lines += [
            "",
            f"Total: {order.total:.2f}",
        ]
        if order.customer.full_address:
            lines.append(f"Shipping to: {order.customer.full_address}")
        lines += [
            "",
            f"- {self.store_name}",
        ]
        return "\n".join(lines)

    def send_confirmation(self, order: Order) -> bool:
        recipient = order.customer.email
        if not recipient:
            return False
        try:
            send_mail(
                subject=self.build_subject(order),
                message=self.build_body(order),
                from_email=self.from_email,
                recipient_list=[recipient],
            )
        except Exception as e:
            logger.error(f"Order confirmation email failed for {order.order_number}: {str(e)}", exc_info=True)
            return False
        return True
