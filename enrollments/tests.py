import datetime

import pytest
from django.core import mail
from django.utils import timezone
from rest_framework.exceptions import ValidationError

from core.exceptions import NotFoundError
from .models import Enrollment
from .services import EnrollmentService

pytestmark = pytest.mark.django_db

APPLICATION = {
    'firstName': 'Kofi',
    'lastName': 'Boateng',
    'email': 'kofi.boateng@example.org',
    'phone': '+233 20 555 0101',
    'education': 'BSc Computer Science',
    'course': 'Web Development',
    'startDate': '2025-02-03',
}


def test_create_defaults_to_pending():
    before = timezone.now()
    enrollment = EnrollmentService().create(APPLICATION)

    assert enrollment.status == Enrollment.PENDING
    assert enrollment.created_at >= before
    assert enrollment.start_date == datetime.date(2025, 2, 3)


def test_optional_fields_may_be_omitted():
    payload = {k: v for k, v in APPLICATION.items() if k not in ('education', 'startDate')}
    enrollment = EnrollmentService().create(payload)

    assert enrollment.education == ''
    assert enrollment.start_date is None


def test_malformed_email_is_rejected_before_storage():
    with pytest.raises(ValidationError):
        EnrollmentService().create({**APPLICATION, 'email': 'kofi@localhost'})

    assert EnrollmentService().list().count() == 0


@pytest.mark.parametrize('field', ['firstName', 'lastName', 'email', 'phone', 'course'])
def test_required_fields(field):
    payload = {k: v for k, v in APPLICATION.items() if k != field}
    with pytest.raises(ValidationError) as excinfo:
        EnrollmentService().create(payload)
    assert field in excinfo.value.detail


def test_applicant_text_is_not_trimmed():
    enrollment = EnrollmentService().create({**APPLICATION, 'firstName': 'Kofi ', 'course': ' Web Development'})

    assert enrollment.first_name == 'Kofi '
    assert enrollment.course == ' Web Development'


def test_operator_is_notified():
    EnrollmentService().create(APPLICATION)

    assert len(mail.outbox) == 1
    sent = mail.outbox[0]
    assert sent.subject == 'New Course Enrollment: Kofi Boateng'
    assert sent.reply_to == ['kofi.boateng@example.org']
    html = sent.alternatives[0][0]
    assert 'Web Development' in html
    assert '2025-02-03' in html


def test_status_transitions_keep_only_latest():
    service = EnrollmentService()
    enrollment = service.create(APPLICATION)

    for status in ('approved', 'enrolled'):
        updated = service.update_by_id(enrollment.pk, {'status': status})
        assert updated.status == status

    stored = Enrollment.objects.get(pk=enrollment.pk)
    assert stored.status == Enrollment.ENROLLED
    assert stored.first_name == 'Kofi'


def test_delete_then_update_is_not_found():
    service = EnrollmentService()
    enrollment = service.create(APPLICATION)

    assert service.delete_by_id(enrollment.pk) == 'Enrollment removed'
    with pytest.raises(NotFoundError):
        service.update_by_id(enrollment.pk, {'status': 'approved'})
    with pytest.raises(NotFoundError):
        service.delete_by_id(enrollment.pk)


def test_round_trip_through_api(api_client, admin_api):
    response = api_client.post('/api/enrollments', APPLICATION, format='json')
    assert response.status_code == 201
    assert response.data['success'] is True
    assert response.data['message'] == 'Enrollment submitted successfully'

    listed = admin_api.get('/api/enrollments').data
    assert len(listed) == 1
    record = listed[0]
    for key, value in APPLICATION.items():
        assert record[key] == value
    assert record['status'] == 'pending'


def test_admin_review_over_http(admin_api):
    enrollment = EnrollmentService().create(APPLICATION)

    response = admin_api.patch(f'/api/enrollments/{enrollment.pk}/', {'status': 'rejected'}, format='json')
    assert response.status_code == 200
    assert response.data['status'] == 'rejected'

    response = admin_api.get(f'/api/enrollments/{enrollment.pk}')
    assert response.data['status'] == 'rejected'


def test_member_cannot_review(member_api):
    enrollment = EnrollmentService().create(APPLICATION)
    response = member_api.put(f'/api/enrollments/{enrollment.pk}', {'status': 'approved'}, format='json')

    assert response.status_code == 403
    assert Enrollment.objects.get(pk=enrollment.pk).status == Enrollment.PENDING


def test_search_matches_applicant(admin_api):
    EnrollmentService().create(APPLICATION)
    EnrollmentService().create({**APPLICATION, 'firstName': 'Esi', 'email': 'esi@example.org'})

    response = admin_api.get('/api/enrollments', {'search': 'esi@'})
    assert [e['firstName'] for e in response.data] == ['Esi']
