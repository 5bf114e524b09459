from datetime import timedelta

import pytest
from django.utils import timezone

from core.exceptions import ConflictError
from .models import Offer
from .services import OfferService

pytestmark = pytest.mark.django_db


def offer_payload(**overrides):
    payload = {
        'title': 'Early bird',
        'discount': '25%',
        'validUntil': (timezone.now() + timedelta(days=1)).isoformat(),
        'description': 'Register early and save.',
        'code': 'EARLY25',
        'conditions': ['New students only', ''],
    }
    payload.update(overrides)
    return payload


def test_create_defaults_to_active():
    offer = OfferService().create(offer_payload())

    assert offer.is_active is True
    assert offer.conditions == ['New students only']


def test_duplicate_code_is_a_conflict():
    service = OfferService()
    first = service.create(offer_payload())

    with pytest.raises(ConflictError):
        service.create(offer_payload(title='Copycat', discount='90%'))

    first.refresh_from_db()
    assert first.title == 'Early bird'
    assert first.discount == '25%'
    assert Offer.objects.count() == 1


def test_duplicate_code_over_http_is_409(admin_api):
    OfferService().create(offer_payload())

    response = admin_api.post('/api/offers', offer_payload(), format='json')

    assert response.status_code == 409
    assert response.data['field'] == 'code'


def test_renaming_to_existing_code_is_a_conflict():
    service = OfferService()
    service.create(offer_payload())
    other = service.create(offer_payload(code='SUMMER10'))

    with pytest.raises(ConflictError):
        service.update_by_id(other.pk, {'code': 'EARLY25'})


def test_list_active_filters_on_flag_and_expiry():
    service = OfferService()
    now = timezone.now()
    yesterday = (now - timedelta(days=1)).isoformat()
    tomorrow = (now + timedelta(days=1)).isoformat()

    expired = service.create(offer_payload(code='OLD', validUntil=yesterday))
    live = service.create(offer_payload(code='LIVE', validUntil=tomorrow))
    switched_off = service.create(offer_payload(code='OFF', validUntil=tomorrow, isActive=False))

    active_ids = [o.pk for o in service.list_active()]

    assert live.pk in active_ids
    assert expired.pk not in active_ids
    assert switched_off.pk not in active_ids


def test_list_active_is_evaluated_at_query_time():
    service = OfferService()
    offer = service.create(offer_payload())

    later = timezone.now() + timedelta(days=2)

    assert list(service.list_active()) == [offer]
    assert list(service.list_active(now=later)) == []


def test_offer_is_active_through_its_last_instant():
    service = OfferService()
    offer = service.create(offer_payload())

    assert offer in service.list_active(now=offer.valid_until)
    assert offer not in service.list_active(now=offer.valid_until + timedelta(microseconds=1))


def test_list_active_keeps_newest_first():
    service = OfferService()
    older = service.create(offer_payload(code='A'))
    newer = service.create(offer_payload(code='B'))
    Offer.objects.filter(pk=older.pk).update(created_at=timezone.now() - timedelta(hours=1))

    assert [o.pk for o in service.list_active()] == [newer.pk, older.pk]


def test_active_endpoint_is_public(api_client):
    OfferService().create(offer_payload())
    OfferService().create(offer_payload(code='GONE', validUntil=(timezone.now() - timedelta(days=1)).isoformat()))

    response = api_client.get('/api/offers/active')

    assert response.status_code == 200
    assert [o['code'] for o in response.data] == ['EARLY25']
    assert response.data[0]['isCurrentlyActive'] is True


def test_date_only_valid_until_is_accepted():
    offer = OfferService().create(offer_payload(validUntil='2031-12-31'))
    assert offer.valid_until.date().isoformat() == '2031-12-31'


def test_admin_crud_over_http(api_client, admin_api):
    assert api_client.post('/api/offers', offer_payload(), format='json').status_code == 401

    created = admin_api.post('/api/offers/', offer_payload(), format='json')
    assert created.status_code == 201
    offer_id = created.data['id']

    updated = admin_api.put(f'/api/offers/{offer_id}', {'isActive': False, 'discount': '30%'}, format='json')
    assert updated.status_code == 200
    assert updated.data['isActive'] is False
    assert updated.data['discount'] == '30%'
    assert updated.data['code'] == 'EARLY25'
    assert updated.data['createdAt'] == created.data['createdAt']

    listed = admin_api.get('/api/offers', {'isActive': 'false'})
    assert [o['id'] for o in listed.data] == [offer_id]

    removed = admin_api.delete(f'/api/offers/{offer_id}')
    assert removed.data == {'message': 'Offer removed'}
    assert admin_api.get(f'/api/offers/{offer_id}').status_code == 404


def test_missing_fields_are_validation_errors(admin_api):
    response = admin_api.post('/api/offers', {'title': 'Half'}, format='json')

    assert response.status_code == 400
    for field in ('discount', 'validUntil', 'description', 'code'):
        assert field in response.data
