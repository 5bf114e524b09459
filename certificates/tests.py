import random
import re
from datetime import datetime, timezone as dt_timezone

import pytest

from core.exceptions import ConflictError, NotFoundError
from .models import Certificate
from .services import CertificateService
from .utils import course_code, generate_certificate_id

CERTIFICATE = {
    'certificateId': 'BMS-2024-WD-000123',
    'studentName': 'Adwoa Owusu',
    'courseName': 'Web Development',
    'completionDate': '2024-06-28',
    'issueDate': '2024-07-01',
    'grade': 'A',
    'instructor': 'Yaw Darko',
    'duration': '12 weeks',
    'skills': ['HTML', 'CSS', 'JavaScript'],
}


@pytest.mark.parametrize('name, expected', [
    ('Web Development', 'WD'),
    ('data science and machine learning', 'DS'),
    ('  Graphic   Design ', 'GD'),
    ('Python', 'P'),
    ('', ''),
])
def test_course_code(name, expected):
    assert course_code(name) == expected


def test_generated_id_format():
    now = datetime(2024, 3, 1, tzinfo=dt_timezone.utc)
    certificate_id = generate_certificate_id('Web Development', now=now, rng=random.Random(7))

    assert re.fullmatch(r'BMS-2024-WD-\d{6}', certificate_id)


def test_random_segment_is_zero_padded():
    class Low:
        def randint(self, a, b):
            return 42

    assert generate_certificate_id('Web Development', rng=Low()).endswith('-WD-000042')


@pytest.mark.django_db
def test_create_builds_credential_url():
    certificate = CertificateService().create(CERTIFICATE)

    assert certificate.is_valid is True
    assert certificate.credential_url == 'https://credentials.bmsacademy.com/verify/BMS-2024-WD-000123'
    assert certificate.skills == ['HTML', 'CSS', 'JavaScript']


@pytest.mark.django_db
def test_create_generates_id_when_omitted():
    payload = {k: v for k, v in CERTIFICATE.items() if k != 'certificateId'}
    certificate = CertificateService().create(payload)

    assert re.fullmatch(r'BMS-\d{4}-WD-\d{6}', certificate.certificate_id)
    assert certificate.credential_url.endswith(f'/verify/{certificate.certificate_id}')


@pytest.mark.django_db
def test_duplicate_certificate_id_is_a_conflict():
    CertificateService().create(CERTIFICATE)
    with pytest.raises(ConflictError):
        CertificateService().create({**CERTIFICATE, 'studentName': 'Someone Else'})
    assert Certificate.objects.get().student_name == 'Adwoa Owusu'


@pytest.mark.django_db
def test_changing_certificate_id_moves_credential_url():
    certificate = CertificateService().create(CERTIFICATE)
    updated = CertificateService().update_by_id(certificate.pk, {'certificateId': 'BMS-2024-WD-000999'})

    assert updated.credential_url.endswith('/verify/BMS-2024-WD-000999')


@pytest.mark.django_db
def test_verify_valid_certificate():
    CertificateService().create(CERTIFICATE)
    certificate = CertificateService().verify_by_certificate_id('BMS-2024-WD-000123')
    assert certificate.student_name == 'Adwoa Owusu'


@pytest.mark.django_db
def test_revoked_and_missing_are_indistinguishable(api_client):
    CertificateService().create({**CERTIFICATE, 'isValid': False})

    revoked = api_client.get('/api/certificates/verify/BMS-2024-WD-000123')
    missing = api_client.get('/api/certificates/verify/BMS-2024-XX-999999')

    assert revoked.status_code == missing.status_code == 404
    assert revoked.data == missing.data == {'valid': False, 'message': 'Certificate not found or invalid'}

    with pytest.raises(NotFoundError) as revoked_error:
        CertificateService().verify_by_certificate_id('BMS-2024-WD-000123')
    with pytest.raises(NotFoundError) as missing_error:
        CertificateService().verify_by_certificate_id('BMS-2024-XX-999999')
    assert str(revoked_error.value.detail) == str(missing_error.value.detail)


@pytest.mark.django_db
def test_public_verification_returns_fields(api_client):
    CertificateService().create(CERTIFICATE)

    response = api_client.get('/api/certificates/verify/BMS-2024-WD-000123/')

    assert response.status_code == 200
    assert response.data['valid'] is True
    assert response.data['studentName'] == 'Adwoa Owusu'
    assert response.data['completionDate'] == '2024-06-28'
    assert response.data['credentialUrl'].endswith('/verify/BMS-2024-WD-000123')


@pytest.mark.django_db
def test_revoking_over_http_stops_verification(api_client, admin_api):
    created = admin_api.post('/api/certificates', CERTIFICATE, format='json')
    assert created.status_code == 201

    response = admin_api.put(f"/api/certificates/{created.data['id']}", {'isValid': False}, format='json')
    assert response.status_code == 200
    assert response.data['isValid'] is False
    assert response.data['studentName'] == 'Adwoa Owusu'

    assert api_client.get('/api/certificates/verify/BMS-2024-WD-000123').status_code == 404


@pytest.mark.django_db
def test_credential_url_and_timestamps_are_not_writable(admin_api):
    created = admin_api.post('/api/certificates', CERTIFICATE, format='json').data

    response = admin_api.put(
        f"/api/certificates/{created['id']}",
        {'credentialUrl': 'https://evil.example/x', 'createdAt': '2000-01-01T00:00:00Z', 'grade': 'B'},
        format='json',
    )

    assert response.data['grade'] == 'B'
    assert response.data['credentialUrl'] == created['credentialUrl']
    assert response.data['createdAt'] == created['createdAt']


@pytest.mark.django_db
def test_management_endpoints_are_admin_only(api_client, member_api):
    assert api_client.get('/api/certificates').status_code == 401
    assert member_api.post('/api/certificates', CERTIFICATE, format='json').status_code == 403
    assert not Certificate.objects.exists()


@pytest.mark.django_db
def test_delete(admin_api):
    certificate = CertificateService().create(CERTIFICATE)

    response = admin_api.delete(f'/api/certificates/{certificate.pk}')

    assert response.data == {'message': 'Certificate removed'}
    assert not Certificate.objects.exists()
