# Serializers
from .outreach_serializer import ContactMessageSerializer, SubscribeSerializer

__all__ = ['ContactMessageSerializer', 'SubscribeSerializer']
