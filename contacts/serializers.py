from rest_framework import serializers

from core.validators import kept_as_sent, validate_email_shape
from .models import Contact


class ContactSerializer(serializers.ModelSerializer):
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = Contact
        fields = ['id', 'name', 'email', 'subject', 'message', 'status', 'createdAt']
        read_only_fields = fields


class ContactCreateSerializer(serializers.ModelSerializer):
    email = serializers.CharField(max_length=254, trim_whitespace=False, validators=[validate_email_shape])
    subject = serializers.CharField(
        max_length=255, required=False, allow_blank=True, allow_null=True, trim_whitespace=False
    )

    class Meta:
        model = Contact
        fields = ['name', 'email', 'subject', 'message']
        extra_kwargs = kept_as_sent('name', 'message')

    def validate_subject(self, value):
        return value or ''


class ContactStatusSerializer(serializers.ModelSerializer):
    """Admins only move a contact through its status; nothing else is editable."""

    class Meta:
        model = Contact
        fields = ['status']
