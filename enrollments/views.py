from core.viewsets import ResourceViewSet
from .serializers import EnrollmentSerializer
from .services import EnrollmentService


class EnrollmentViewSet(ResourceViewSet):
    """Public enrollment form plus the admin review queue."""
    service_class = EnrollmentService
    serializer_class = EnrollmentSerializer
    public_actions = ('create',)
    filterset_fields = ['status', 'course']
    search_fields = ['first_name', 'last_name', 'email', 'phone', 'course']

    def created_payload(self, enrollment):
        return {
            'success': True,
            'message': 'Enrollment submitted successfully',
            'enrollment': EnrollmentSerializer(enrollment).data,
        }
