"""
Catalog tests: product entity rules and the products API.
"""
from decimal import Decimal

import pytest

from apps.products.domain.entities.product import Product, parse_sizes
from apps.products.domain.exceptions import InvalidProductError, InvalidSizeError
from apps.products.infrastructure.repositories import DjangoProductRepository

PRODUCTS_URL = '/api/v1/products/'


class TestProductEntity:

    def test_create_defaults(self):
        product = Product.create(name='  Away Kit ', price='999')

        assert product.name == 'Away Kit'
        assert product.price.amount == Decimal('999')
        assert product.category == 'General'
        assert product.sizes == ['S', 'M', 'L', 'XL', '2XL']
        assert product.stock.quantity == 10
        assert product.is_in_stock

    def test_create_emits_event(self):
        product = Product.create(name='Away Kit', price='999', team='Arsenal')

        events = product.clear_domain_events()
        assert events[0].product_id == product.id
        assert events[0].team == 'Arsenal'

    @pytest.mark.parametrize('kwargs, field', [
        ({'name': '   ', 'price': '10'}, 'name'),
        ({'name': 'Kit', 'price': 'abc'}, 'price'),
        ({'name': 'Kit', 'price': 'NaN'}, 'price'),
        ({'name': 'Kit', 'price': '10', 'stock': -1}, 'stock'),
        ({'name': 'Kit', 'price': '10', 'stock': 2.5}, 'stock'),
    ])
    def test_invalid_product(self, kwargs, field):
        with pytest.raises(InvalidProductError) as excinfo:
            Product.create(**kwargs)
        assert excinfo.value.field == field

    def test_parse_sizes(self):
        assert parse_sizes(' S, M ,,L') == ['S', 'M', 'L']
        assert parse_sizes(['XL', ' ']) == ['XL']

    def test_update_info_only_touches_given_fields(self):
        product = Product.create(name='Kit', price='10', team='Arsenal')
        product.update_info(price='12.50', stock=0)

        assert product.price.amount == Decimal('12.50')
        assert product.team == 'Arsenal'
        assert not product.is_in_stock

    def test_to_cart_candidate(self):
        product = Product.create(name='Kit', price='10', image='/k.png', team='Arsenal', sizes='M,L')
        candidate = product.to_cart_candidate('M', custom_name='SAKA')

        assert candidate.product_id == str(product.id)
        assert candidate.unit_price == Decimal('10')
        assert candidate.custom_name == 'SAKA'
        assert candidate.custom_number is None

    def test_to_cart_candidate_rejects_unknown_size(self):
        product = Product.create(name='Kit', price='10', sizes='M,L')

        with pytest.raises(InvalidSizeError):
            product.to_cart_candidate('XS')


@pytest.mark.django_db
class TestProductRepository:

    def test_round_trip(self, product):
        found = DjangoProductRepository().find_by_id(product.id)

        assert found == product
        assert found.sizes == ['S', 'M', 'L']
        assert found.price.amount == Decimal('1499.00')

    def test_filters_and_count(self, product):
        repository = DjangoProductRepository()
        repository.save(Product.create(name='Training Top', price='799', category='ISL', featured=True))
        repository.save(Product.create(name='Retro', price='999', category='Retro'))

        assert repository.count(category='ISL') == 2
        assert repository.count(featured=True) == 1
        assert [p.name for p in repository.find_all(team='Kerala Blasters')] == ['Home Kit 24/25']

    def test_delete(self, product):
        repository = DjangoProductRepository()

        assert repository.delete(product.id) is True
        assert repository.find_by_id(product.id) is None
        assert repository.delete(product.id) is False


@pytest.mark.django_db
class TestProductsAPI:

    def test_list(self, api_client, product):
        response = api_client.get(PRODUCTS_URL)

        assert response.status_code == 200
        assert response.data['total'] == 1
        assert response.data['page'] == 1
        assert response.data['page_size'] == 20
        assert response.data['items'][0]['name'] == 'Home Kit 24/25'

    def test_list_page_size_is_clamped(self, api_client, product):
        assert api_client.get(PRODUCTS_URL, {'page_size': 500}).data['page_size'] == 50
        assert api_client.get(PRODUCTS_URL, {'page_size': 0}).data['page_size'] == 1

    def test_list_pages(self, api_client):
        repository = DjangoProductRepository()
        for number in range(3):
            repository.save(Product.create(name=f'Kit {number}', price='10'))

        response = api_client.get(PRODUCTS_URL, {'page': 2, 'page_size': 2})

        assert response.data['total'] == 3
        assert len(response.data['items']) == 1

    def test_list_filters(self, api_client, product):
        DjangoProductRepository().save(Product.create(name='Retro', price='999', category='Retro', featured=True))

        assert api_client.get(PRODUCTS_URL, {'category': 'ISL'}).data['total'] == 1
        featured = api_client.get(PRODUCTS_URL, {'featured': 'true'}).data
        assert [item['name'] for item in featured['items']] == ['Retro']

    def test_detail(self, api_client, product):
        response = api_client.get(f'{PRODUCTS_URL}{product.id}/')

        assert response.status_code == 200
        assert response.data['sizes'] == ['S', 'M', 'L']
        assert response.data['price'] == '1499.00'
        assert response.data['price_display'] == '₹1,499.00'

    def test_detail_not_found(self, api_client, db):
        response = api_client.get(f'{PRODUCTS_URL}00000000-0000-0000-0000-000000000000/')

        assert response.status_code == 404
        assert response.data['code'] == 'PRODUCT_NOT_FOUND'

    def test_anonymous_cannot_create(self, api_client, db):
        response = api_client.post(PRODUCTS_URL, {'name': 'Kit', 'price': '10'}, format='json')

        assert response.status_code == 403

    def test_staff_create(self, staff_client):
        response = staff_client.post(
            PRODUCTS_URL,
            {'name': 'Third Kit', 'price': '1299', 'team': 'Arsenal', 'sizes': ['M', 'L']},
            format='json',
        )

        assert response.status_code == 201
        assert response.data['sizes'] == ['M', 'L']
        assert response.data['category'] == 'General'
        assert response.data['stock'] == 10

    def test_staff_create_rejects_negative_stock(self, staff_client):
        response = staff_client.post(PRODUCTS_URL, {'name': 'Kit', 'price': '10', 'stock': -1}, format='json')

        assert response.status_code == 400

    def test_staff_replace(self, staff_client, product):
        response = staff_client.put(
            f'{PRODUCTS_URL}{product.id}/',
            {'name': 'Home Kit', 'price': '1599', 'sizes': 'S,M'},
            format='json',
        )

        assert response.status_code == 200
        assert response.data['price'] == '1599.00'
        assert response.data['sizes'] == ['S', 'M']

    def test_staff_delete(self, staff_client, product):
        response = staff_client.delete(f'{PRODUCTS_URL}{product.id}/')

        assert response.status_code == 204
        assert staff_client.get(f'{PRODUCTS_URL}{product.id}/').status_code == 404
