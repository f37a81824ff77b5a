"""
Django ORM implementation of OrderRepository.
"""
from datetime import date
from decimal import Decimal
from typing import Dict, List, Optional
from uuid import UUID

from django.db import transaction
from django.db.models import Sum
from django.db.models.functions import TruncDate

from ...domain.entities.order import Order
from ...domain.entities.order_item import OrderItem
from ...domain.repositories.order_repository import OrderRepository
from ...domain.value_objects.customer_info import CustomerInfo
from ...domain.value_objects.order_number import OrderNumber
from ...domain.value_objects.order_status import OrderStatus
from ..models.order_model import OrderModel, OrderItemModel


class DjangoOrderRepository(OrderRepository):
    """Django ORM based order repository implementation."""

    def save(self, order: Order) -> Order:
        """Write the order row and replace its items in one transaction."""
        with transaction.atomic():
            model, created = OrderModel.objects.update_or_create(
                id=order.id,
                defaults={
                    'order_number': order.order_number.value,
                    'status': order.status.value,
                    'total': order.total,
                    'customer_email': order.customer.email or '',
                    'customer': order.customer.to_dict(),
                }
            )
            if not created:
                model.items.all().delete()
            OrderItemModel.objects.bulk_create([
                OrderItemModel(
                    id=item.id,
                    order=model,
                    product_id=item.product_id,
                    product_name=item.product_name,
                    size=item.size,
                    custom_name=item.custom_name,
                    custom_number=item.custom_number,
                    quantity=item.quantity,
                    unit_price=item.unit_price,
                )
                for item in order.items
            ])
            return self._to_entity(model)

    def find_by_id(self, order_id: UUID) -> Optional[Order]:
        """Find an order by ID."""
        try:
            model = OrderModel.objects.prefetch_related('items').get(id=order_id)
            return self._to_entity(model)
        except OrderModel.DoesNotExist:
            return None

    def find_by_customer_email(self, email: str, offset: int = 0, limit: int = 50) -> List[Order]:
        """Orders placed with ``email``, newest first."""
        queryset = (
            OrderModel.objects
            .filter(customer_email__iexact=email)
            .prefetch_related('items')
            .order_by('-created_at')
        )
        return [self._to_entity(model) for model in queryset[offset:offset + limit]]

    def count(self) -> int:
        return OrderModel.objects.count()

    def revenue_by_day(self, since: date) -> Dict[date, Decimal]:
        """Summed totals of non-cancelled orders per day, in the current time zone."""
        rows = (
            OrderModel.objects
            .filter(created_at__date__gte=since)
            .exclude(status=OrderStatus.CANCELLED.value)
            .annotate(day=TruncDate('created_at'))
            .values('day')
            .annotate(revenue=Sum('total'))
            .order_by('day')
        )
        return {row['day']: Decimal(str(row['revenue'])) for row in rows}

    def _to_entity(self, model: OrderModel) -> Order:
        """Convert Django model to domain entity."""
        items = [
            OrderItem(
                id=item.id,
                order_id=model.id,
                product_id=item.product_id,
                product_name=item.product_name,
                size=item.size,
                custom_name=item.custom_name,
                custom_number=item.custom_number,
                quantity=item.quantity,
                unit_price=Decimal(str(item.unit_price)),
                created_at=item.created_at,
                updated_at=item.created_at,
            )
            for item in model.items.all()
        ]
        return Order(
            id=model.id,
            order_number=OrderNumber(value=model.order_number),
            customer=CustomerInfo.from_dict(model.customer),
            items=items,
            status=OrderStatus(model.status),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
