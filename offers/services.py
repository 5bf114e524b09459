from django.utils import timezone

from core.resources import ResourceService
from .models import Offer
from .serializers import OfferWriteSerializer


class OfferService(ResourceService):
    model = Offer
    create_serializer_class = OfferWriteSerializer
    update_serializer_class = OfferWriteSerializer
    unique_field = 'code'
    unique_label = 'code'

    def list_active(self, now=None):
        """Offers live at `now` (defaults to the time of the query), newest first."""
        return self.list().currently_active(now or timezone.now())
