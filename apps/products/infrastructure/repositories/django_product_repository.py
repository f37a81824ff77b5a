"""
Django ORM implementation of ProductRepository.
"""
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from django.db import transaction

from ...domain.entities.product import Product, parse_sizes
from ...domain.repositories.product_repository import ProductRepository
from ...domain.value_objects.money import Money
from ...domain.value_objects.stock import Stock
from ..models.product_model import ProductModel


class DjangoProductRepository(ProductRepository):
    """Django ORM based product repository implementation."""

    def save(self, product: Product) -> Product:
        """Save a product entity."""
        with transaction.atomic():
            model, created = ProductModel.objects.update_or_create(
                id=product.id,
                defaults={
                    'product_number': product.product_number,
                    'name': product.name,
                    'description': product.description,
                    'price': product.price.amount,
                    'currency': product.price.currency,
                    'image': product.image,
                    'category': product.category,
                    'team': product.team,
                    'sizes': ','.join(product.sizes),
                    'stock': product.stock.quantity,
                    'featured': product.featured,
                }
            )
            return self._to_entity(model)

    def find_by_id(self, product_id: UUID) -> Optional[Product]:
        """Find a product by ID."""
        try:
            model = ProductModel.objects.get(id=product_id)
            return self._to_entity(model)
        except (ProductModel.DoesNotExist, ValueError):
            return None

    def _filtered(self, category=None, team=None, featured=None):
        queryset = ProductModel.objects.all()
        if category:
            queryset = queryset.filter(category=category)
        if team:
            queryset = queryset.filter(team=team)
        if featured:
            queryset = queryset.filter(featured=True)
        return queryset

    def find_all(
        self,
        category: Optional[str] = None,
        team: Optional[str] = None,
        featured: Optional[bool] = None,
        order: str = 'desc',
        offset: int = 0,
        limit: int = 20,
    ) -> List[Product]:
        """List products, newest first unless ``order='asc'``."""
        ordering = 'created_at' if order == 'asc' else '-created_at'
        queryset = self._filtered(category, team, featured).order_by(ordering)
        return [self._to_entity(model) for model in queryset[offset:offset + limit]]

    def count(
        self,
        category: Optional[str] = None,
        team: Optional[str] = None,
        featured: Optional[bool] = None,
    ) -> int:
        return self._filtered(category, team, featured).count()

    def delete(self, product_id: UUID) -> bool:
        """Delete a product."""
        deleted, _ = ProductModel.objects.filter(id=product_id).delete()
        return deleted > 0

    def _to_entity(self, model: ProductModel) -> Product:
        """Convert Django model to domain entity."""
        return Product(
            id=model.id,
            product_number=model.product_number,
            name=model.name,
            description=model.description,
            price=Money(amount=Decimal(str(model.price)), currency=model.currency),
            image=model.image,
            category=model.category,
            team=model.team,
            sizes=parse_sizes(model.sizes),
            stock=Stock(quantity=model.stock),
            featured=model.featured,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
