"""
Order tests: aggregate lifecycle, checkout use case and the orders API.
"""
from decimal import Decimal
from unittest.mock import patch

import pytest
from django.core import mail

from apps.cart.domain.entities.cart_line_item import CartLineItem
from apps.orders.application.dtos.order_dto import PlaceOrderDTO
from apps.orders.application.use_cases import PlaceOrderUseCase
from apps.orders.domain.entities.order import Order
from apps.orders.domain.exceptions import EmptyCartError, InvalidOrderStateError
from apps.orders.domain.repositories.order_repository import OrderRepository
from apps.orders.domain.value_objects.customer_info import CustomerInfo
from apps.orders.domain.value_objects.order_status import OrderStatus
from apps.orders.infrastructure.notifications import OrderConfirmationNotifier

ORDERS_URL = '/api/v1/orders/'
CUSTOMER = CustomerInfo(email='fan@example.com', first_name='Asha', city='Kochi')


class FakeOrderRepository(OrderRepository):

    def __init__(self, fail=False):
        self.fail = fail
        self.orders = {}

    def save(self, order):
        if self.fail:
            raise RuntimeError("database is down")
        self.orders[order.id] = order
        return order

    def find_by_id(self, order_id):
        return self.orders.get(order_id)

    def find_by_customer_email(self, email, offset=0, limit=50):
        return [o for o in self.orders.values() if o.customer.email == email][offset:offset + limit]

    def count(self):
        return len(self.orders)

    def revenue_by_day(self, since):
        return {}


def cart_lines(make_candidate):
    first = CartLineItem.from_candidate(make_candidate('p1', price='500'))
    first.quantity = 2
    second = CartLineItem.from_candidate(make_candidate('p2', price='1000', custom_name='ASHA'))
    return [first, second]


class TestOrderEntity:

    def test_create_from_cart(self, make_candidate):
        order = Order.create_from_cart(cart_lines(make_candidate), CUSTOMER)

        assert order.status == OrderStatus.PAID
        assert order.total == Decimal('2000')
        assert order.item_count == 3
        assert order.order_number.value.startswith('ORD-')
        assert order.items[1].is_customized
        assert order.clear_domain_events()[0].total == Decimal('2000')

    def test_order_is_independent_of_cart_lines(self, make_candidate):
        lines = cart_lines(make_candidate)
        order = Order.create_from_cart(lines, CUSTOMER)
        lines[0].quantity = 9

        assert order.items[0].quantity == 2

    def test_lifecycle(self, make_candidate):
        order = Order.create_from_cart(cart_lines(make_candidate), CUSTOMER)
        order.ship()
        order.deliver()

        assert order.status == OrderStatus.DELIVERED
        assert not order.is_cancellable

    def test_cannot_cancel_shipped_order(self, make_candidate):
        order = Order.create_from_cart(cart_lines(make_candidate), CUSTOMER)
        order.ship()

        with pytest.raises(InvalidOrderStateError):
            order.cancel()

    def test_transition_to(self, make_candidate):
        order = Order.create_from_cart(cart_lines(make_candidate), CUSTOMER)
        order.transition_to(OrderStatus.CANCELLED)

        assert order.status == OrderStatus.CANCELLED
        with pytest.raises(InvalidOrderStateError):
            order.transition_to(OrderStatus.PAID)


class TestPlaceOrderUseCase:

    def test_empty_cart_is_rejected(self, cart_store):
        with pytest.raises(EmptyCartError):
            PlaceOrderUseCase(order_repository=FakeOrderRepository(), cart_store=cart_store).execute(
                PlaceOrderDTO(customer=CUSTOMER)
            )

    def test_success_clears_cart(self, cart_store, make_candidate):
        cart_store.add_item(make_candidate())
        repository = FakeOrderRepository()

        result = PlaceOrderUseCase(order_repository=repository, cart_store=cart_store).execute(
            PlaceOrderDTO(customer=CUSTOMER)
        )

        assert result.success
        assert result.data.total == Decimal('500')
        assert len(repository.orders) == 1
        assert cart_store.is_empty

    def test_failed_save_keeps_cart(self, cart_store, make_candidate):
        cart_store.add_item(make_candidate())

        with pytest.raises(RuntimeError):
            PlaceOrderUseCase(order_repository=FakeOrderRepository(fail=True), cart_store=cart_store).execute(
                PlaceOrderDTO(customer=CUSTOMER)
            )

        assert cart_store.item_count == 1

    def test_sends_confirmation(self, cart_store, make_candidate):
        cart_store.add_item(make_candidate(custom_name='ASHA', custom_number='9'))

        PlaceOrderUseCase(
            order_repository=FakeOrderRepository(),
            cart_store=cart_store,
            notifier=OrderConfirmationNotifier(),
        ).execute(PlaceOrderDTO(customer=CUSTOMER))

        assert len(mail.outbox) == 1
        message = mail.outbox[0]
        assert message.to == ['fan@example.com']
        assert message.subject.startswith('Order Confirmation #ORD-')
        assert 'Hi Asha' in message.body
        assert 'ASHA 9' in message.body
        assert 'Shipping to: Kochi' in message.body

    def test_no_email_no_confirmation(self, cart_store, make_candidate):
        cart_store.add_item(make_candidate())

        PlaceOrderUseCase(
            order_repository=FakeOrderRepository(),
            cart_store=cart_store,
            notifier=OrderConfirmationNotifier(),
        ).execute(PlaceOrderDTO(customer=CustomerInfo(first_name='Asha')))

        assert mail.outbox == []
        assert cart_store.is_empty

    def test_mail_failure_does_not_fail_order(self, cart_store, make_candidate):
        cart_store.add_item(make_candidate())

        with patch(
            'apps.orders.infrastructure.notifications.order_confirmation.send_mail',
            side_effect=ConnectionError('smtp down'),
        ):
            result = PlaceOrderUseCase(
                order_repository=FakeOrderRepository(),
                cart_store=cart_store,
                notifier=OrderConfirmationNotifier(),
            ).execute(PlaceOrderDTO(customer=CUSTOMER))

        assert result.success
        assert cart_store.is_empty


@pytest.mark.django_db
class TestOrdersAPI:

    def checkout(self, client, product, email='fan@example.com'):
        client.post(
            '/api/v1/cart/items/',
            {'product_id': str(product.id), 'size': 'M', 'custom_name': 'ASHA'},
            format='json',
        )
        return client.post(
            ORDERS_URL,
            {'customer': {'email': email, 'first_name': 'Asha', 'address': '1 MG Road', 'city': 'Kochi'}},
            format='json',
        )

    def test_checkout(self, api_client, product):
        response = self.checkout(api_client, product)

        assert response.status_code == 201
        assert response.data['status'] == 'paid'
        assert response.data['total'] == '1499.00'
        assert response.data['items'][0]['custom_name'] == 'ASHA'
        assert response.data['customer']['city'] == 'Kochi'
        assert api_client.get('/api/v1/cart/').data['items'] == []
        assert len(mail.outbox) == 1

    def test_checkout_empty_cart(self, api_client):
        response = api_client.post(ORDERS_URL, {'customer': {'email': 'fan@example.com'}}, format='json')

        assert response.status_code == 422
        assert response.data['code'] == 'EMPTY_CART'

    def test_history_requires_email(self, api_client):
        response = api_client.get(ORDERS_URL)

        assert response.status_code == 400
        assert response.data['field'] == 'email'

    def test_history_by_email(self, api_client, product):
        self.checkout(api_client, product)
        self.checkout(api_client, product, email='other@example.com')

        response = api_client.get(ORDERS_URL, {'email': 'FAN@example.com'})

        assert response.status_code == 200
        assert len(response.data) == 1
        assert response.data[0]['customer']['email'] == 'fan@example.com'

    def test_detail(self, api_client, product):
        order_id = self.checkout(api_client, product).data['id']

        response = api_client.get(f'{ORDERS_URL}{order_id}/')

        assert response.status_code == 200
        assert response.data['item_count'] == 1

    def test_detail_not_found(self, api_client):
        response = api_client.get(f'{ORDERS_URL}00000000-0000-0000-0000-000000000000/')

        assert response.status_code == 404
        assert response.data['code'] == 'ORDER_NOT_FOUND'

    def test_status_update_requires_staff(self, api_client, product):
        order_id = self.checkout(api_client, product).data['id']

        response = api_client.patch(f'{ORDERS_URL}{order_id}/status/', {'status': 'shipped'}, format='json')

        assert response.status_code == 403

    def test_staff_status_update(self, staff_client, product):
        order_id = self.checkout(staff_client, product).data['id']
        url = f'{ORDERS_URL}{order_id}/status/'

        response = staff_client.patch(url, {'status': 'shipped'}, format='json')
        assert response.status_code == 200
        assert response.data['status'] == 'shipped'
        assert response.data['items'][0]['product_name'] == 'Home Kit 24/25'

        response = staff_client.patch(url, {'status': 'cancelled'}, format='json')
        assert response.status_code == 409
