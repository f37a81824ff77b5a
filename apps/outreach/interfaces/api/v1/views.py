"""
Contact and newsletter API v1 views.
"""
import logging

from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from ....infrastructure.notifications import OutreachMailer
from ...serializers.outreach_serializer import ContactMessageSerializer, SubscribeSerializer

logger = logging.getLogger(__name__)


@extend_schema(tags=['Outreach'])
class ContactView(APIView):
    """Contact form endpoint."""
    permission_classes = [AllowAny]

    @extend_schema(request=ContactMessageSerializer, summary="Send a message to the store")
    def post(self, request):
        serializer = ContactMessageSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        sent = OutreachMailer().send_contact_message(**serializer.validated_data)
        if not sent:
            return Response(
                {'error': 'Failed to send message', 'code': 'MAIL_DELIVERY_FAILED'},
                status=status.HTTP_503_SERVICE_UNAVAILABLE,
            )
        return Response({'message': 'Message sent successfully'})


@extend_schema(tags=['Outreach'])
class SubscribeView(APIView):
    """Newsletter sign-up endpoint."""
    permission_classes = [AllowAny]

    @extend_schema(request=SubscribeSerializer, summary="Subscribe to the newsletter")
    def post(self, request):
        serializer = SubscribeSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        email = serializer.validated_data['email']
        if not OutreachMailer().send_subscription_welcome(email):
            logger.warning(f"Subscribed {email} without a welcome email")
        return Response({'success': True, 'message': 'Subscribed successfully'})
