"""
Pytest configuration and fixtures.
"""
from decimal import Decimal

import pytest

from apps.cart.application.cart_store import CartStore
from apps.cart.domain.entities.cart_line_item import CartItemCandidate
from apps.cart.infrastructure.repositories import InMemoryCartSnapshotRepository


@pytest.fixture
def api_client():
    """Create an API client for testing."""
    from rest_framework.test import APIClient
    return APIClient()


@pytest.fixture
def staff_client(api_client, django_user_model):
    """API client authenticated as a staff user."""
    user = django_user_model.objects.create_user(
        username='admin',
        email='admin@example.com',
        password='testpass123',
        is_staff=True,
    )
    api_client.force_authenticate(user=user)
    return api_client


@pytest.fixture
def snapshot_repository():
    return InMemoryCartSnapshotRepository()


@pytest.fixture
def cart_store(snapshot_repository):
    return CartStore(snapshot_repository)


@pytest.fixture
def make_candidate():
    """Build cart candidates with sensible jersey defaults."""
    def _make(product_id='p1', size='M', price='500', **overrides):
        fields = {
            'product_id': product_id,
            'name': f'Jersey {product_id}',
            'unit_price': Decimal(price),
            'image': f'/img/{product_id}.png',
            'team': 'Arsenal',
            'size': size,
        }
        fields.update(overrides)
        return CartItemCandidate(**fields)
    return _make


@pytest.fixture
def product(db):
    """A saved catalog product."""
    from apps.products.domain.entities.product import Product
    from apps.products.infrastructure.repositories import DjangoProductRepository

    return DjangoProductRepository().save(
        Product.create(
            name='Home Kit 24/25',
            price=Decimal('1499.00'),
            image='/img/home.png',
            team='Kerala Blasters',
            category='ISL',
            sizes='S,M,L',
            stock=20,
        )
    )
