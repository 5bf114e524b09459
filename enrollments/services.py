from core.notifications import dispatch_notification
from core.resources import ResourceService
from .models import Enrollment
from .serializers import EnrollmentCreateSerializer, EnrollmentStatusSerializer


class EnrollmentService(ResourceService):
    model = Enrollment
    create_serializer_class = EnrollmentCreateSerializer
    update_serializer_class = EnrollmentStatusSerializer

    def after_create(self, enrollment):
        dispatch_notification(
            f'New Course Enrollment: {enrollment.full_name}',
            'emails/enrollment_notification.html',
            {'enrollment': enrollment},
            reply_to=enrollment.email,
        )
