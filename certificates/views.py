import django_filters
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.response import Response

from core.exceptions import NotFoundError
from core.viewsets import ResourceViewSet
from .models import Certificate
from .serializers import CertificateSerializer
from .services import CertificateService


class CertificateFilter(django_filters.FilterSet):
    isValid = django_filters.BooleanFilter(field_name='is_valid')

    class Meta:
        model = Certificate
        fields = ['isValid']


class CertificateViewSet(ResourceViewSet):
    service_class = CertificateService
    serializer_class = CertificateSerializer
    public_actions = ('verify',)
    filterset_class = CertificateFilter
    search_fields = ['certificate_id', 'student_name', 'course_name', 'instructor']

    @action(detail=False, methods=['get'], url_path=r'verify/(?P<certificate_id>[^/]+)')
    def verify(self, request, certificate_id=None):
        """Public certificate check used by the verification page."""
        try:
            certificate = self.service.verify_by_certificate_id(certificate_id)
        except NotFoundError as exc:
            return Response({'valid': False, 'message': str(exc.detail)}, status=status.HTTP_404_NOT_FOUND)
        return Response({'valid': True, **self.get_serializer(certificate).data})
