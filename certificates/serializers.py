from rest_framework import serializers

from core.validators import kept_as_sent, validate_not_blank
from .models import Certificate


class CertificateSerializer(serializers.ModelSerializer):
    certificateId = serializers.CharField(source='certificate_id', read_only=True)
    studentName = serializers.CharField(source='student_name', read_only=True)
    courseName = serializers.CharField(source='course_name', read_only=True)
    completionDate = serializers.DateField(source='completion_date', read_only=True)
    issueDate = serializers.DateField(source='issue_date', read_only=True)
    credentialUrl = serializers.CharField(source='credential_url', read_only=True)
    isValid = serializers.BooleanField(source='is_valid', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = Certificate
        fields = [
            'id', 'certificateId', 'studentName', 'courseName', 'completionDate',
            'issueDate', 'grade', 'instructor', 'duration', 'skills',
            'credentialUrl', 'isValid', 'createdAt',
        ]
        read_only_fields = fields


class CertificateWriteSerializer(serializers.ModelSerializer):
    """Admin-editable certificate fields.

    `certificateId` may be omitted on create; the service then generates one.
    """
    certificateId = serializers.CharField(source='certificate_id', max_length=50, required=False, allow_blank=True)
    studentName = serializers.CharField(
        source='student_name', max_length=255, trim_whitespace=False, validators=[validate_not_blank]
    )
    courseName = serializers.CharField(
        source='course_name', max_length=255, trim_whitespace=False, validators=[validate_not_blank]
    )
    completionDate = serializers.DateField(source='completion_date')
    issueDate = serializers.DateField(source='issue_date')
    skills = serializers.ListField(
        child=serializers.CharField(max_length=100, allow_blank=True), required=False, allow_empty=True
    )
    isValid = serializers.BooleanField(source='is_valid', required=False)

    class Meta:
        model = Certificate
        fields = [
            'certificateId', 'studentName', 'courseName', 'completionDate',
            'issueDate', 'grade', 'instructor', 'duration', 'skills', 'isValid',
        ]
        extra_kwargs = kept_as_sent('grade', 'instructor', 'duration')

    def validate_skills(self, value):
        return [skill for skill in value if skill.strip()]

    def validate(self, attrs):
        # An update may not blank out the public ID
        if self.instance is not None and 'certificate_id' in attrs and not attrs['certificate_id']:
            raise serializers.ValidationError({'certificateId': 'This field may not be blank.'})
        return attrs
