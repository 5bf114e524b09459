from datetime import timedelta

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError
from django.utils import timezone

from contacts.services import ContactService
from enrollments.services import EnrollmentService
from offers.services import OfferService
from .models import User

pytestmark = pytest.mark.django_db


def test_token_login_accepts_email(api_client, admin_account):
    response = api_client.post(
        '/api/admin/token/',
        {'username': 'ADMIN@bmsacademy.com', 'password': 's3cret-pass'},
        format='json',
    )

    assert response.status_code == 200
    assert 'access' in response.data

    api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {response.data['access']}")
    assert api_client.get('/api/contacts').status_code == 200


def test_token_login_rejects_wrong_password(api_client, admin_account):
    response = api_client.post(
        '/api/admin/token', {'username': 'admin', 'password': 'nope'}, format='json'
    )
    assert response.status_code == 401


def test_garbage_bearer_is_401(api_client):
    api_client.credentials(HTTP_AUTHORIZATION='Bearer not-a-jwt')
    assert api_client.get('/api/offers').status_code == 401


def test_staff_flag_counts_as_admin(django_user_model):
    user = django_user_model.objects.create_user(username='ops', password='x', is_staff=True)
    assert user.is_admin


def test_me(member_api):
    response = member_api.get('/api/admin/me')
    assert response.data['username'] == 'member'
    assert response.data['isAdmin'] is False


def test_dashboard_counts(admin_api, member_api):
    contact = ContactService().create({'name': 'A', 'email': 'a@b.co', 'message': 'hi'})
    ContactService().create({'name': 'B', 'email': 'b@b.co', 'message': 'hi'})
    ContactService().update_by_id(contact.pk, {'status': 'read'})
    EnrollmentService().create({
        'firstName': 'C', 'lastName': 'D', 'email': 'c@d.co', 'phone': '1', 'course': 'Design',
    })
    OfferService().create({
        'title': 'Live', 'discount': '10%', 'description': '-', 'code': 'LIVE',
        'validUntil': (timezone.now() + timedelta(days=3)).isoformat(),
    })
    OfferService().create({
        'title': 'Old', 'discount': '10%', 'description': '-', 'code': 'OLD',
        'validUntil': (timezone.now() - timedelta(days=3)).isoformat(),
    })

    assert member_api.get('/api/admin/dashboard').status_code == 403
    data = admin_api.get('/api/admin/dashboard').data

    assert data['contacts'] == {'total': 2, 'byStatus': {'unread': 1, 'read': 1, 'replied': 0}}
    assert data['enrollments']['byStatus']['pending'] == 1
    assert data['offers'] == {'total': 2, 'active': 1}
    assert data['certificates'] == {'total': 0, 'valid': 0}


def test_create_admin_command():
    call_command('create_admin', 'office', '--email', 'office@bmsacademy.com', '--password', 'pw')

    user = User.objects.get(username='office')
    assert user.role == User.ADMIN
    assert user.is_staff
    assert user.check_password('pw')


def test_create_admin_promotes_existing(member_account):
    call_command('create_admin', 'member')

    member_account.refresh_from_db()
    assert member_account.is_admin
    assert member_account.check_password('s3cret-pass')


def test_create_admin_needs_password_for_new_account():
    with pytest.raises(CommandError):
        call_command('create_admin', 'ghost')
