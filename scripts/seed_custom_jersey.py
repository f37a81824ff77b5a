#!/usr/bin/env python
"""Create the customizable "Custom Team Jersey" product if it is missing."""
import os
import sys
import django

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings.local')
django.setup()

from decimal import Decimal

from apps.products.domain.entities.product import Product
from apps.products.infrastructure.models import ProductModel
from apps.products.infrastructure.repositories import DjangoProductRepository

CUSTOM_JERSEY_NAME = 'Custom Team Jersey'


def main():
    existing = ProductModel.objects.filter(name=CUSTOM_JERSEY_NAME).first()
    if existing:
        print(f'"{CUSTOM_JERSEY_NAME}" already exists: {existing.id}')
        return

    product = Product.create(
        name=CUSTOM_JERSEY_NAME,
        price=Decimal('1999'),
        description=(
            'Create your legacy. Fully customizable match jersey with your name '
            'and number. Premium fabric and authentic team details.'
        ),
        image='https://images.unsplash.com/photo-1577212017184-80cc0da11395?q=80&w=1000&auto=format&fit=crop',
        category='Create Your Own',
        team='Custom Lab',
        sizes='S, M, L, XL, 2XL',
        stock=999,
        featured=True,
    )
    saved = DjangoProductRepository().save(product)
    print(f'Created product: {saved.name} ({saved.id})')


if __name__ == '__main__':
    main()
