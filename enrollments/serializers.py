from rest_framework import serializers

from core.validators import kept_as_sent, validate_email_shape, validate_not_blank
from .models import Enrollment


class EnrollmentSerializer(serializers.ModelSerializer):
    firstName = serializers.CharField(source='first_name', read_only=True)
    lastName = serializers.CharField(source='last_name', read_only=True)
    startDate = serializers.DateField(source='start_date', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = Enrollment
        fields = [
            'id', 'firstName', 'lastName', 'email', 'phone', 'education',
            'course', 'startDate', 'status', 'createdAt',
        ]
        read_only_fields = fields


class EnrollmentCreateSerializer(serializers.ModelSerializer):
    firstName = serializers.CharField(
        source='first_name', max_length=150, trim_whitespace=False, validators=[validate_not_blank]
    )
    lastName = serializers.CharField(
        source='last_name', max_length=150, trim_whitespace=False, validators=[validate_not_blank]
    )
    email = serializers.CharField(max_length=254, trim_whitespace=False, validators=[validate_email_shape])
    education = serializers.CharField(
        max_length=255, required=False, allow_blank=True, allow_null=True, trim_whitespace=False
    )
    startDate = serializers.DateField(source='start_date', required=False, allow_null=True)

    class Meta:
        model = Enrollment
        fields = ['firstName', 'lastName', 'email', 'phone', 'education', 'course', 'startDate']
        extra_kwargs = kept_as_sent('phone', 'course')

    def validate_education(self, value):
        return value or ''


class EnrollmentStatusSerializer(serializers.ModelSerializer):
    """Only the review status moves after submission."""

    class Meta:
        model = Enrollment
        fields = ['status']
