from core.notifications import dispatch_notification
from core.resources import ResourceService
from .models import Contact
from .serializers import ContactCreateSerializer, ContactStatusSerializer


class ContactService(ResourceService):
    model = Contact
    create_serializer_class = ContactCreateSerializer
    update_serializer_class = ContactStatusSerializer

    def after_create(self, contact):
        dispatch_notification(
            contact.subject or f'New Contact Form Submission from {contact.name}',
            'emails/contact_notification.html',
            {'contact': contact},
            reply_to=contact.email,
        )
