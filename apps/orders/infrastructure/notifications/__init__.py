from .order_confirmation import OrderConfirmationNotifier

__all__ = ['OrderConfirmationNotifier']
