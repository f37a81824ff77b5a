"""
Contact and newsletter serializers.
"""
from rest_framework import serializers


class ContactMessageSerializer(serializers.Serializer):
    """Serializer for the contact form."""
    name = serializers.CharField(max_length=100)
    email = serializers.EmailField()
    message = serializers.CharField(max_length=5000)


class SubscribeSerializer(serializers.Serializer):
    """Serializer for newsletter sign-up."""
    email = serializers.EmailField()
