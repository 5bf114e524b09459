import django_filters
from rest_framework.decorators import action
from rest_framework.response import Response

from core.viewsets import ResourceViewSet
from .models import Offer
from .serializers import OfferSerializer
from .services import OfferService


class OfferFilter(django_filters.FilterSet):
    isActive = django_filters.BooleanFilter(field_name='is_active')

    class Meta:
        model = Offer
        fields = ['isActive']


class OfferViewSet(ResourceViewSet):
    service_class = OfferService
    serializer_class = OfferSerializer
    public_actions = ('active',)
    filterset_class = OfferFilter
    search_fields = ['title', 'code', 'description']

    @action(detail=False, methods=['get'])
    def active(self, request):
        """Offers currently shown on the public site."""
        serializer = self.get_serializer(self.service.list_active(), many=True)
        return Response(serializer.data)
