import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken


@pytest.fixture(autouse=True)
def inline_notifications(settings):
    settings.NOTIFICATIONS_ASYNC = False
    settings.CONTACT_EMAIL = 'office@bmsacademy.com'
    settings.DEFAULT_FROM_EMAIL = 'no-reply@bmsacademy.com'
    settings.CERTIFICATE_VERIFICATION_BASE_URL = 'https://credentials.bmsacademy.com'


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def admin_account(django_user_model):
    return django_user_model.objects.create_user(
        username='admin', email='admin@bmsacademy.com', password='s3cret-pass', role='admin'
    )


@pytest.fixture
def member_account(django_user_model):
    return django_user_model.objects.create_user(
        username='member', email='member@example.com', password='s3cret-pass'
    )


def bearer_client(user):
    client = APIClient()
    token = RefreshToken.for_user(user).access_token
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {token}')
    return client


@pytest.fixture
def admin_api(admin_account):
    return bearer_client(admin_account)


@pytest.fixture
def member_api(member_account):
    return bearer_client(member_account)
