import re

from rest_framework import serializers

# local@domain.tld, nothing stricter
EMAIL_SHAPE = re.compile(r'^[^\s@]+@[^\s@]+\.[^\s@]+$')


def validate_email_shape(value):
    if not EMAIL_SHAPE.match(value or ''):
        raise serializers.ValidationError('Invalid email format')
    return value


def validate_not_blank(value):
    if not value.strip():
        raise serializers.ValidationError('This field may not be blank.')
    return value


def kept_as_sent(*fields):
    """extra_kwargs for required text fields stored exactly as submitted."""
    return {field: {'trim_whitespace': False, 'validators': [validate_not_blank]} for field in fields}
