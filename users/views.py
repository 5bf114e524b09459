from django.db.models import Count
from django.utils import timezone
from rest_framework import permissions
from rest_framework.response import Response
from rest_framework.views import APIView

from certificates.models import Certificate
from contacts.models import Contact
from enrollments.models import Enrollment
from offers.models import Offer
from .permissions import IsAdmin
from .serializers import UserSerializer


def _status_counts(model, choices):
    counts = {value: 0 for value, _label in choices}
    for row in model.objects.order_by().values('status').annotate(total=Count('id')):
        counts[row['status']] = row['total']
    return counts


class MeView(APIView):
    permission_classes = [permissions.IsAuthenticated]

    def get(self, request):
        return Response(UserSerializer(request.user).data)


class DashboardView(APIView):
    """Headline numbers for the admin dashboard landing page."""
    permission_classes = [IsAdmin]

    def get(self, request):
        now = timezone.now()
        data = {
            'contacts': {
                'total': Contact.objects.count(),
                'byStatus': _status_counts(Contact, Contact.STATUS_CHOICES),
            },
            'enrollments': {
                'total': Enrollment.objects.count(),
                'byStatus': _status_counts(Enrollment, Enrollment.STATUS_CHOICES),
            },
            'offers': {
                'total': Offer.objects.count(),
                'active': Offer.objects.currently_active(now).count(),
            },
            'certificates': {
                'total': Certificate.objects.count(),
                'valid': Certificate.objects.filter(is_valid=True).count(),
            },
        }
        return Response(data)
