import logging

import pytest
from django.core import mail
from django.db import DatabaseError

from contacts.services import ContactService
from .notifications import dispatch_notification, send_notification
from .exceptions import NotificationError


@pytest.mark.django_db
def test_storage_failure_is_an_opaque_500(admin_api, monkeypatch):
    def unreachable(self):
        raise DatabaseError('connection refused on 10.0.0.5')

    monkeypatch.setattr(ContactService, 'list', unreachable)

    response = admin_api.get('/api/contacts')

    assert response.status_code == 500
    assert response.data == {'message': 'Server Error'}
    assert '10.0.0.5' not in response.content.decode()


@pytest.mark.django_db
def test_write_failure_is_an_opaque_500(api_client, monkeypatch):
    def disk_full(self, *args, **kwargs):
        raise DatabaseError('disk I/O error')

    monkeypatch.setattr('contacts.models.Contact.save', disk_full)

    response = api_client.post(
        '/api/contacts',
        {'name': 'A', 'email': 'a@b.co', 'message': 'hi'},
        format='json',
    )

    assert response.status_code == 500
    assert response.data == {'message': 'Server Error'}
    assert len(mail.outbox) == 0


def test_health(api_client):
    response = api_client.get('/api/health')
    assert response.status_code == 200
    assert response.json() == {'status': 'OK'}


def test_index(client):
    response = client.get('/')
    assert response.content == b'API is running...'


def test_disallowed_origin_is_rejected(api_client):
    response = api_client.get('/api/health', HTTP_ORIGIN='https://evil.example')
    assert response.status_code == 403


def test_allowed_origin_gets_cors_headers(api_client):
    response = api_client.get('/api/health', HTTP_ORIGIN='http://localhost:5173')

    assert response.status_code == 200
    assert response['Access-Control-Allow-Origin'] == 'http://localhost:5173'


def test_security_headers(api_client):
    response = api_client.get('/api/health')
    assert response['X-Content-Type-Options'] == 'nosniff'
    assert 'Content-Security-Policy' in response


def test_send_notification_requires_operator_inbox(settings):
    settings.CONTACT_EMAIL = ''
    with pytest.raises(NotificationError):
        send_notification('Hello', 'emails/contact_notification.html', {'contact': {}})


def test_async_dispatch_runs_off_thread(settings):
    settings.NOTIFICATIONS_ASYNC = True

    worker = dispatch_notification(
        'Threaded',
        'emails/contact_notification.html',
        {'contact': {'name': 'Efua', 'email': 'efua@example.com', 'message': 'hi'}},
        reply_to='efua@example.com',
    )
    worker.join(timeout=5)

    assert not worker.is_alive()
    assert [m.subject for m in mail.outbox] == ['Threaded']


def test_dispatch_swallows_and_logs_failures(settings, caplog):
    settings.CONTACT_EMAIL = ''

    with caplog.at_level(logging.ERROR, logger='core.notifications'):
        assert dispatch_notification('Lost', 'emails/contact_notification.html', {}) is None

    assert 'Error sending notification email' in caplog.text


@pytest.mark.django_db
@pytest.mark.parametrize('path', ['/api/contacts', '/api/contacts/'])
def test_collection_routes_accept_either_slash(api_client, path):
    payload = {'name': 'Ama', 'email': 'ama@example.com', 'message': 'Hello'}

    response = api_client.post(path, payload, format='json')

    assert response.status_code == 201


@pytest.mark.django_db
@pytest.mark.parametrize('suffix', ['', '/'])
def test_detail_and_action_routes_accept_either_slash(api_client, admin_api, suffix):
    contact = ContactService().create({'name': 'Ama', 'email': 'ama@example.com', 'message': 'Hello'})

    assert admin_api.patch(f'/api/contacts/{contact.pk}{suffix}', {'status': 'read'}, format='json').status_code == 200
    assert api_client.get(f'/api/offers/active{suffix}').status_code == 200
    verification = api_client.get(f'/api/certificates/verify/BMS-2024-WD-000001{suffix}')
    assert verification.status_code == 404
    assert verification.data['valid'] is False
