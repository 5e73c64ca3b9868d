import json

import pytest
from django.core.exceptions import ObjectDoesNotExist
from django.db import IntegrityError
from django.http import Http404
from django.test import RequestFactory
from rest_framework.exceptions import ValidationError

from apps.core.handlers import INTERNAL_ERROR_MESSAGE, NOT_FOUND_MESSAGE, api_exception_handler, not_found
from apps.sales.exceptions import InsufficientStock, OwnerNotFound, StockShortfall


@pytest.fixture
def context():
    return {'view': None}


def test_insufficient_stock_is_a_client_error(context):
    exc = InsufficientStock([StockShortfall('p-1', 3, 1)])

    response = api_exception_handler(exc, context)

    assert response.status_code == 400
    assert response.data == {
        'message': 'Insufficient Stock',
        'shortfalls': [{'productId': 'p-1', 'requested': 3, 'available': 1}],
    }


def test_owner_not_found_keeps_its_status(context):
    assert api_exception_handler(OwnerNotFound(), context).status_code == 404


@pytest.mark.parametrize('exc', [Http404(), ObjectDoesNotExist()])
def test_not_found_conditions(context, exc):
    response = api_exception_handler(exc, context)

    assert response.status_code == 404
    assert response.data == {'message': NOT_FOUND_MESSAGE}


def test_integrity_error_is_reported_with_its_message(context):
    response = api_exception_handler(IntegrityError('UNIQUE constraint failed: users_user.email'), context)

    assert response.status_code == 400
    assert response.data == {'message': 'UNIQUE constraint failed: users_user.email'}


def test_validation_error_keeps_drf_rendering(context):
    response = api_exception_handler(ValidationError({'name': ['This field is required.']}), context)

    assert response.status_code == 400
    assert response.data == {'name': ['This field is required.']}


def test_unexpected_error_is_a_server_error(context, settings, caplog):
    settings.DEBUG = False

    with caplog.at_level('ERROR', logger='apps.core.handlers'):
        response = api_exception_handler(RuntimeError('disk on fire'), context)

    assert response.status_code == 500
    assert response.data == {'message': INTERNAL_ERROR_MESSAGE}
    assert 'disk on fire' in caplog.text


def test_unexpected_error_message_is_shown_in_debug(context, settings):
    settings.DEBUG = True

    response = api_exception_handler(RuntimeError('disk on fire'), context)

    assert response.data == {'message': 'disk on fire'}


def test_unmatched_url_gets_json_not_found():
    request = RequestFactory().get('/orders/not-a-uuid')

    response = not_found(request, Http404())

    assert response.status_code == 404
    assert response['Content-Type'] == 'application/json'
    assert json.loads(response.content) == {'message': NOT_FOUND_MESSAGE}
