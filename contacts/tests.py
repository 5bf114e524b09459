from datetime import timedelta

import pytest
from django.core import mail
from django.utils import timezone
from rest_framework.exceptions import ValidationError

from core.exceptions import NotFoundError
from .models import Contact
from .services import ContactService

pytestmark = pytest.mark.django_db

VALID = {
    'name': 'Ama Mensah',
    'email': 'ama@example.com',
    'subject': 'Weekend classes',
    'message': 'Do you run weekend classes?\nThanks.',
}


def test_create_defaults_to_unread_and_stamps_created_at():
    before = timezone.now()
    contact = ContactService().create(VALID)

    assert contact.pk is not None
    assert contact.status == Contact.UNREAD
    assert contact.created_at >= before


def test_create_rejects_malformed_email_without_persisting():
    with pytest.raises(ValidationError) as excinfo:
        ContactService().create({**VALID, 'email': 'not-an-email'})

    assert 'email' in excinfo.value.detail
    assert ContactService().list().count() == 0


@pytest.mark.parametrize('field', ['name', 'email', 'message'])
def test_create_requires_non_empty_fields(field):
    with pytest.raises(ValidationError) as excinfo:
        ContactService().create({**VALID, field: ''})
    assert field in excinfo.value.detail
    assert not Contact.objects.exists()


def test_subject_is_optional():
    payload = {k: v for k, v in VALID.items() if k != 'subject'}
    contact = ContactService().create(payload)
    assert contact.subject == ''


def test_create_emails_the_operator():
    ContactService().create(VALID)

    assert len(mail.outbox) == 1
    sent = mail.outbox[0]
    assert sent.subject == 'Weekend classes'
    assert sent.to == ['office@bmsacademy.com']
    assert sent.reply_to == ['ama@example.com']
    assert 'Ama Mensah' in sent.alternatives[0][0]


def test_notification_subject_falls_back_to_sender_name():
    ContactService().create({**VALID, 'subject': ''})
    assert mail.outbox[0].subject == 'New Contact Form Submission from Ama Mensah'


def test_multiline_subject_still_reaches_the_operator():
    contact = ContactService().create({**VALID, 'subject': 'Weekend\nclasses?\r\n'})

    assert contact.subject == 'Weekend\nclasses?\r\n'
    assert len(mail.outbox) == 1
    assert mail.outbox[0].subject == 'Weekend classes?'


def test_text_is_stored_as_submitted(admin_api):
    payload = {**VALID, 'name': ' Ama ', 'message': '    indented code\n\n    more\n\n'}
    ContactService().create(payload)

    body = admin_api.get('/api/contacts').data[0]

    assert body['name'] == ' Ama '
    assert body['message'] == '    indented code\n\n    more\n\n'


def test_whitespace_only_name_is_blank():
    with pytest.raises(ValidationError) as excinfo:
        ContactService().create({**VALID, 'name': '   '})
    assert 'name' in excinfo.value.detail
    assert not Contact.objects.exists()


def test_mail_failure_does_not_fail_create(monkeypatch, caplog):
    def broken_send(self, fail_silently=False):
        raise ConnectionRefusedError('smtp down')

    monkeypatch.setattr('django.core.mail.EmailMultiAlternatives.send', broken_send)

    contact = ContactService().create(VALID)

    assert Contact.objects.filter(pk=contact.pk).exists()
    assert 'Error sending notification email' in caplog.text


def test_public_submission_response_shape(api_client):
    response = api_client.post('/api/contacts', VALID, format='json')

    assert response.status_code == 201
    assert response.data['success'] is True
    body = response.data['contact']
    assert body['status'] == 'unread'
    assert body['name'] == VALID['name']
    assert body['message'] == VALID['message']
    assert 'createdAt' in body


def test_public_submission_reports_field_errors(api_client):
    response = api_client.post('/api/contacts/', {'name': 'A', 'email': 'bad'}, format='json')

    assert response.status_code == 400
    assert 'email' in response.data
    assert 'message' in response.data


def test_listing_requires_admin(api_client, member_api):
    assert api_client.get('/api/contacts').status_code == 401
    assert member_api.get('/api/contacts').status_code == 403


def test_admin_lists_newest_first(admin_api):
    older = ContactService().create({**VALID, 'name': 'Older'})
    newer = ContactService().create({**VALID, 'name': 'Newer'})
    Contact.objects.filter(pk=older.pk).update(created_at=timezone.now() - timedelta(days=1))

    response = admin_api.get('/api/contacts')

    assert response.status_code == 200
    assert [c['id'] for c in response.data] == [newer.pk, older.pk]


def test_admin_can_filter_by_status(admin_api):
    read = ContactService().create(VALID)
    ContactService().create(VALID)
    ContactService().update_by_id(read.pk, {'status': 'read'})

    response = admin_api.get('/api/contacts', {'status': 'read'})

    assert [c['id'] for c in response.data] == [read.pk]


def test_status_update_ignores_other_fields(admin_api):
    contact = ContactService().create(VALID)
    created_at = contact.created_at

    response = admin_api.put(
        f'/api/contacts/{contact.pk}',
        {'status': 'replied', 'name': 'Changed', 'id': 999, 'createdAt': '2000-01-01T00:00:00Z'},
        format='json',
    )

    assert response.status_code == 200
    contact.refresh_from_db()
    assert contact.status == Contact.REPLIED
    assert contact.name == VALID['name']
    assert contact.pk == response.data['id']
    assert contact.created_at == created_at


def test_status_update_rejects_unknown_status(admin_api):
    contact = ContactService().create(VALID)
    response = admin_api.put(f'/api/contacts/{contact.pk}', {'status': 'archived'}, format='json')
    assert response.status_code == 400
    assert 'status' in response.data


def test_update_missing_contact_is_404(admin_api):
    response = admin_api.put('/api/contacts/4242', {'status': 'read'}, format='json')
    assert response.status_code == 404
    assert response.data == {'message': 'Contact not found'}


def test_delete_then_everything_is_not_found(admin_api):
    contact = ContactService().create(VALID)

    response = admin_api.delete(f'/api/contacts/{contact.pk}')
    assert response.status_code == 200
    assert response.data == {'message': 'Contact removed'}

    assert admin_api.delete(f'/api/contacts/{contact.pk}').status_code == 404
    with pytest.raises(NotFoundError):
        ContactService().update_by_id(contact.pk, {'status': 'read'})


def test_guard_runs_before_service(api_client):
    contact = ContactService().create(VALID)
    assert api_client.delete(f'/api/contacts/{contact.pk}').status_code == 401
    assert Contact.objects.filter(pk=contact.pk).exists()
