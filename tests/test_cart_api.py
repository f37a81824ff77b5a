"""
Cart API tests.
"""
import pytest
from django.test import override_settings

CART_URL = '/api/v1/cart/'
ITEMS_URL = '/api/v1/cart/items/'
DECREMENT_URL = '/api/v1/cart/items/decrement/'


def direct_line(**overrides):
    data = {
        'product_id': 'p1',
        'name': 'Retro Jersey',
        'unit_price': '500.00',
        'image': '/img/p1.png',
        'team': 'Arsenal',
        'size': 'M',
    }
    data.update(overrides)
    return data


@pytest.mark.django_db
class TestCartAPI:

    def test_empty_cart(self, api_client):
        response = api_client.get(CART_URL)

        assert response.status_code == 200
        assert response.data['items'] == []
        assert response.data['total'] == '0.00'
        assert response.data['item_count'] == 0
        assert response.data['is_open'] is False

    def test_add_direct_line_opens_cart(self, api_client):
        response = api_client.post(ITEMS_URL, direct_line(), format='json')

        assert response.status_code == 200
        assert response.data['is_open'] is True
        assert response.data['item_count'] == 1
        line = response.data['items'][0]
        assert line['name'] == 'Retro Jersey'
        assert line['custom_name'] is None
        assert line['quantity'] == 1

    def test_cart_persists_across_requests(self, api_client):
        api_client.post(ITEMS_URL, direct_line(), format='json')
        api_client.post(ITEMS_URL, direct_line(), format='json')
        api_client.post(ITEMS_URL, direct_line(product_id='p2', unit_price='1000'), format='json')

        response = api_client.get(CART_URL)

        assert [line['quantity'] for line in response.data['items']] == [2, 1]
        assert response.data['total'] == '2000.00'
        assert response.data['item_count'] == 3

    def test_totals_beyond_input_price_precision(self, api_client):
        line = direct_line(unit_price='9999999999.99')
        api_client.post(ITEMS_URL, line, format='json')
        response = api_client.post(ITEMS_URL, line, format='json')

        assert response.status_code == 200
        assert response.data['items'][0]['subtotal'] == '19999999999.98'
        assert response.data['total'] == '19999999999.98'

        response = api_client.post(ITEMS_URL, direct_line(product_id='p2', unit_price='9999999999.99'), format='json')
        assert response.status_code == 200
        assert response.data['total'] == '29999999999.97'

    def test_personalized_lines_stay_separate(self, api_client):
        api_client.post(ITEMS_URL, direct_line(), format='json')
        api_client.post(ITEMS_URL, direct_line(custom_name='SAHAL', custom_number='10'), format='json')
        response = api_client.post(ITEMS_URL, direct_line(custom_name='', custom_number=''), format='json')

        assert len(response.data['items']) == 3

    def test_shoppers_have_separate_carts(self, api_client, client):
        api_client.post(ITEMS_URL, direct_line(), format='json')

        response = client.get(CART_URL)
        assert response.json()['items'] == []

    def test_add_from_catalog(self, api_client, product):
        response = api_client.post(
            ITEMS_URL,
            {'product_id': str(product.id), 'size': 'L', 'custom_number': '7'},
            format='json',
        )

        assert response.status_code == 200
        line = response.data['items'][0]
        assert line['name'] == 'Home Kit 24/25'
        assert line['team'] == 'Kerala Blasters'
        assert line['unit_price'] == '1499.00'
        assert line['custom_number'] == '7'
        assert line['custom_name'] is None

    def test_add_unknown_product(self, api_client):
        response = api_client.post(
            ITEMS_URL,
            {'product_id': '00000000-0000-0000-0000-000000000000', 'size': 'M'},
            format='json',
        )

        assert response.status_code == 404
        assert response.data['code'] == 'PRODUCT_NOT_FOUND'

    def test_add_malformed_product_id(self, api_client):
        response = api_client.post(ITEMS_URL, {'product_id': 'not-a-uuid', 'size': 'M'}, format='json')

        assert response.status_code == 404

    def test_add_size_not_offered(self, api_client, product):
        response = api_client.post(ITEMS_URL, {'product_id': str(product.id), 'size': 'XL'}, format='json')

        assert response.status_code == 400
        assert response.data['field'] == 'size'

    def test_add_requires_size(self, api_client):
        response = api_client.post(ITEMS_URL, {'product_id': 'p1'}, format='json')

        assert response.status_code == 400

    def test_remove_matches_every_personalization(self, api_client):
        api_client.post(ITEMS_URL, direct_line(), format='json')
        api_client.post(ITEMS_URL, direct_line(custom_name='SAHAL'), format='json')
        api_client.post(ITEMS_URL, direct_line(size='L'), format='json')

        response = api_client.delete(ITEMS_URL, {'product_id': 'p1', 'size': 'M'}, format='json')

        assert [line['size'] for line in response.data['items']] == ['L']

    def test_remove_with_explicit_personalization(self, api_client):
        api_client.post(ITEMS_URL, direct_line(), format='json')
        api_client.post(ITEMS_URL, direct_line(custom_name='SAHAL'), format='json')

        response = api_client.delete(
            ITEMS_URL,
            {'product_id': 'p1', 'size': 'M', 'custom_name': 'SAHAL'},
            format='json',
        )

        assert len(response.data['items']) == 1
        assert response.data['items'][0]['custom_name'] is None

    def test_remove_missing_line_is_noop(self, api_client):
        api_client.post(ITEMS_URL, direct_line(), format='json')

        response = api_client.delete(ITEMS_URL, {'product_id': 'zzz', 'size': 'M'}, format='json')

        assert response.status_code == 200
        assert response.data['item_count'] == 1

    def test_decrement(self, api_client):
        api_client.post(ITEMS_URL, direct_line(), format='json')
        api_client.post(ITEMS_URL, direct_line(), format='json')

        response = api_client.post(DECREMENT_URL, {'product_id': 'p1', 'size': 'M'}, format='json')
        assert response.data['items'][0]['quantity'] == 1

        response = api_client.post(DECREMENT_URL, {'product_id': 'p1', 'size': 'M'}, format='json')
        assert response.data['items'] == []
        assert response.data['total'] == '0.00'

    def test_clear_keeps_drawer_state(self, api_client):
        api_client.post(ITEMS_URL, direct_line(), format='json')

        response = api_client.delete(CART_URL)

        assert response.data['items'] == []
        assert response.data['is_open'] is True

    def test_drawer_transitions(self, api_client):
        assert api_client.post('/api/v1/cart/open/').data['is_open'] is True
        assert api_client.post('/api/v1/cart/open/').data['is_open'] is True
        assert api_client.post('/api/v1/cart/toggle/').data['is_open'] is False
        assert api_client.post('/api/v1/cart/toggle/').data['is_open'] is True
        assert api_client.post('/api/v1/cart/close/').data['is_open'] is False
        assert api_client.get(CART_URL).data['is_open'] is False

    @override_settings(CART_STORAGE_BACKEND='null')
    def test_null_backend_still_serves_requests(self, api_client):
        response = api_client.post(ITEMS_URL, direct_line(), format='json')
        assert response.data['item_count'] == 1

        assert api_client.get(CART_URL).data['items'] == []

    @override_settings(CART_STORAGE_BACKEND='cache')
    def test_cache_backend_persists(self, api_client):
        from django.core.cache import cache
        cache.clear()

        api_client.post(ITEMS_URL, direct_line(), format='json')

        assert api_client.get(CART_URL).data['item_count'] == 1
