"""
Contact form and newsletter emails.
"""
import logging

from django.conf import settings
from django.core.mail import EmailMessage

logger = logging.getLogger(__name__)


class OutreachMailer:
    """
    Mail for shoppers who are not (yet) customers.

    Like order confirmations, every send is best effort and reports
    success as a bool instead of raising.
    """

    def __init__(self, contact_email: str = None, newsletter_from: str = None, store_name: str = None):
        self.contact_email = contact_email or settings.CONTACT_EMAIL
        self.newsletter_from = newsletter_from or getattr(settings, 'NEWSLETTER_EMAIL_FROM', settings.DEFAULT_FROM_EMAIL)
        self.store_name = store_name or getattr(settings, 'STORE_NAME', 'Jersey Store')

    def send_contact_message(self, name: str, email: str, message: str) -> bool:
        """Forward a contact form to the store inbox; replying answers the sender."""
        body = "\n".join([
            f"From: {name} ({email})",
            "",
            message,
            "",
            "You can reply directly to this email to contact the user.",
        ])
        return self._send(EmailMessage(
            subject=f"New Message from {name} - {self.store_name} Contact",
            body=body,
            from_email=settings.DEFAULT_FROM_EMAIL,
            to=[self.contact_email],
            reply_to=[email],
        ))

    def send_subscription_welcome(self, email: str) -> bool:
        body = "\n".join([
            "You're on the list!",
            "",
            f"Thanks for subscribing to the {self.store_name} newsletter.",
            "You'll be the first to know about new kit drops, restocks and exclusive offers.",
            "",
            f"- {self.store_name}",
        ])
        return self._send(EmailMessage(
            subject=f"Welcome to the {self.store_name} Newsletter",
            body=body,
            from_email=self.newsletter_from,
            to=[email],
        ))

    def _send(self, message: EmailMessage) -> bool:
        try:
            message.send()
        except Exception as e:
            logger.error(f"Email '{message.subject}' to {message.to} failed: {str(e)}", exc_info=True)
            return False
        return True
