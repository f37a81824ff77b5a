"""
Contact form and newsletter tests.
"""
from unittest.mock import patch

import pytest
from django.core import mail
from django.test import override_settings

from apps.outreach.infrastructure.notifications import OutreachMailer

CONTACT_URL = '/api/v1/contact/'
SUBSCRIBE_URL = '/api/v1/subscribe/'


@override_settings(CONTACT_EMAIL='inbox@example.com')
def test_contact_message_goes_to_store_inbox():
    assert OutreachMailer().send_contact_message('Asha', 'asha@example.com', 'Do you ship to Goa?')

    message = mail.outbox[0]
    assert message.to == ['inbox@example.com']
    assert message.reply_to == ['asha@example.com']
    assert message.subject.startswith('New Message from Asha')
    assert 'Do you ship to Goa?' in message.body


def test_send_failure_is_reported_not_raised():
    with patch('django.core.mail.EmailMessage.send', side_effect=ConnectionError('smtp down')):
        assert OutreachMailer().send_subscription_welcome('fan@example.com') is False


@pytest.mark.django_db
class TestOutreachAPI:

    def test_contact(self, api_client):
        response = api_client.post(
            CONTACT_URL,
            {'name': 'Asha', 'email': 'asha@example.com', 'message': 'Hello'},
            format='json',
        )

        assert response.status_code == 200
        assert len(mail.outbox) == 1

    def test_contact_requires_every_field(self, api_client):
        response = api_client.post(CONTACT_URL, {'name': 'Asha', 'email': 'asha@example.com'}, format='json')

        assert response.status_code == 400
        assert mail.outbox == []

    def test_contact_mail_failure(self, api_client):
        with patch('django.core.mail.EmailMessage.send', side_effect=ConnectionError('smtp down')):
            response = api_client.post(
                CONTACT_URL,
                {'name': 'Asha', 'email': 'asha@example.com', 'message': 'Hello'},
                format='json',
            )

        assert response.status_code == 503
        assert response.data['code'] == 'MAIL_DELIVERY_FAILED'

    def test_subscribe(self, api_client):
        response = api_client.post(SUBSCRIBE_URL, {'email': 'fan@example.com'}, format='json')

        assert response.status_code == 200
        assert response.data['success'] is True
        assert mail.outbox[0].to == ['fan@example.com']

    def test_subscribe_requires_email(self, api_client):
        assert api_client.post(SUBSCRIBE_URL, {}, format='json').status_code == 400

    def test_subscribe_succeeds_without_mail(self, api_client):
        with patch('django.core.mail.EmailMessage.send', side_effect=ConnectionError('smtp down')):
            response = api_client.post(SUBSCRIBE_URL, {'email': 'fan@example.com'}, format='json')

        assert response.status_code == 200
