from core.viewsets import ResourceViewSet
from .serializers import ContactSerializer
from .services import ContactService


class ContactViewSet(ResourceViewSet):
    """Public contact form submission plus the admin inbox."""
    service_class = ContactService
    serializer_class = ContactSerializer
    public_actions = ('create',)
    filterset_fields = ['status']
    search_fields = ['name', 'email', 'subject', 'message']

    def created_payload(self, contact):
        return {'success': True, 'contact': ContactSerializer(contact).data}
