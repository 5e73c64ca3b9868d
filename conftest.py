import itertools
from decimal import Decimal

import pytest
from rest_framework.test import APIClient

from apps.sales.models import Product
from apps.users.models import User, UserPreference


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def make_user(db):
    counter = itertools.count(1)

    def _make(**fields):
        n = next(counter)
        receive_email = fields.pop('receive_email', False)
        fields.setdefault('email', f'user{n}@example.com')
        fields.setdefault('first_name', 'Test')
        fields.setdefault('last_name', f'User{n}')
        user = User.objects.create(**fields)
        UserPreference.objects.create(user=user, receive_email=receive_email)
        return user

    return _make


@pytest.fixture
def make_product(db):
    counter = itertools.count(1)

    def _make(**fields):
        n = next(counter)
        fields.setdefault('name', f'Product {n}')
        fields.setdefault('category', Product.Category.KITCHENWARE)
        fields.setdefault('price', Decimal('10.00'))
        fields.setdefault('stock', 10)
        return Product.objects.create(**fields)

    return _make
