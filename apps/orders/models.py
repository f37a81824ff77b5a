# Django discovers models here; they live in the infrastructure layer.
from .infrastructure.models import OrderModel, OrderItemModel  # noqa: F401
