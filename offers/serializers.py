from rest_framework import serializers

from core.validators import kept_as_sent
from .models import Offer

DATETIME_INPUT_FORMATS = ['iso-8601', '%Y-%m-%d']


class OfferSerializer(serializers.ModelSerializer):
    validUntil = serializers.DateTimeField(source='valid_until', read_only=True)
    isActive = serializers.BooleanField(source='is_active', read_only=True)
    isCurrentlyActive = serializers.SerializerMethodField()
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = Offer
        fields = [
            'id', 'title', 'discount', 'validUntil', 'description', 'code',
            'conditions', 'isActive', 'isCurrentlyActive', 'createdAt',
        ]
        read_only_fields = fields

    def get_isCurrentlyActive(self, obj):
        return obj.is_currently_active()


class OfferWriteSerializer(serializers.ModelSerializer):
    """Fields an admin may set on create and patch on update.

    Uniqueness of `code` is enforced by the service so a clash is reported as
    a conflict rather than a validation error.
    """
    code = serializers.CharField(max_length=64)
    validUntil = serializers.DateTimeField(source='valid_until', input_formats=DATETIME_INPUT_FORMATS)
    conditions = serializers.ListField(
        child=serializers.CharField(max_length=500, allow_blank=True), required=False, allow_empty=True
    )
    isActive = serializers.BooleanField(source='is_active', required=False)

    class Meta:
        model = Offer
        fields = ['title', 'discount', 'validUntil', 'description', 'code', 'conditions', 'isActive']
        extra_kwargs = kept_as_sent('title', 'discount', 'description')

    def validate_conditions(self, value):
        # The dashboard submits one empty row by default
        return [condition for condition in value if condition.strip()]
