import uuid
from decimal import Decimal

import pytest

from apps.sales.exceptions import InsufficientStock, InvalidOrder, OwnerNotFound, UnknownProduct
from apps.sales.models import Order, OrderItem, Product
from apps.sales.services.order_placement import OrderPlacement, aggregate_demand, find_shortfalls

pytestmark = pytest.mark.django_db


def _stock(product):
    product.refresh_from_db()
    return product.stock


def test_exact_stock_is_sufficient(make_user, make_product):
    owner = make_user()
    product = make_product(stock=5)

    order = OrderPlacement().place(owner.pk, [{'product_id': product.pk, 'quantity': 5}])

    assert _stock(product) == 0
    assert order.user_id == owner.pk
    assert order.status == Order.Status.PENDING
    assert [item.quantity for item in order.items.all()] == [5]


def test_one_over_stock_is_rejected_without_side_effects(make_user, make_product):
    owner = make_user()
    product = make_product(stock=5)

    with pytest.raises(InsufficientStock) as excinfo:
        OrderPlacement().place(owner.pk, [{'product_id': product.pk, 'quantity': 6}])

    shortfall = excinfo.value.shortfalls[0]
    assert (shortfall.product_id, shortfall.requested, shortfall.available) == (product.pk, 6, 5)
    assert _stock(product) == 5
    assert Order.objects.count() == 0
    assert OrderItem.objects.count() == 0


def test_one_short_line_rejects_the_whole_order(make_user, make_product):
    owner = make_user()
    plenty = make_product(stock=50)
    scarce = make_product(stock=1)

    with pytest.raises(InsufficientStock) as excinfo:
        OrderPlacement().place(owner.pk, [
            {'product_id': plenty.pk, 'quantity': 3},
            {'product_id': scarce.pk, 'quantity': 2},
        ])

    assert [s.product_id for s in excinfo.value.shortfalls] == [scarce.pk]
    assert _stock(plenty) == 50
    assert _stock(scarce) == 1
    assert Order.objects.count() == 0


def test_duplicate_lines_are_aggregated_before_checking(make_user, make_product):
    owner = make_user()
    product = make_product(stock=5)

    # each line fits on its own, together they do not
    with pytest.raises(InsufficientStock) as excinfo:
        OrderPlacement().place(owner.pk, [
            {'product_id': product.pk, 'quantity': 3},
            {'product_id': product.pk, 'quantity': 3},
        ])

    assert excinfo.value.shortfalls[0].requested == 6
    assert _stock(product) == 5


def test_duplicate_lines_keep_one_item_each_and_decrement_the_sum(make_user, make_product):
    owner = make_user()
    product = make_product(stock=10, price=Decimal('4.00'))

    order = OrderPlacement().place(owner.pk, [
        {'product_id': product.pk, 'quantity': 2, 'unit_price': Decimal('4.00')},
        {'product_id': str(product.pk), 'quantity': 3, 'unit_price': Decimal('3.50')},
    ])

    assert sorted(item.quantity for item in order.items.all()) == [2, 3]
    assert order.total == Decimal('18.50')
    assert _stock(product) == 5


def test_unit_price_defaults_to_current_product_price(make_user, make_product):
    owner = make_user()
    product = make_product(price=Decimal('12.34'))

    order = OrderPlacement().place(owner.pk, [{'product_id': product.pk, 'quantity': 1}])
    Product.objects.filter(pk=product.pk).update(price=Decimal('99.00'))

    item = OrderItem.objects.get(order=order)
    assert item.unit_price == Decimal('12.34')


def test_unknown_product_is_a_shortfall_not_skipped(make_user, make_product):
    owner = make_user()
    product = make_product(stock=5)
    missing = uuid.uuid4()

    with pytest.raises(UnknownProduct) as excinfo:
        OrderPlacement().place(owner.pk, [
            {'product_id': product.pk, 'quantity': 1},
            {'product_id': missing, 'quantity': 1},
        ])

    assert isinstance(excinfo.value, InsufficientStock)
    assert excinfo.value.shortfalls[0].product_id == missing
    assert excinfo.value.shortfalls[0].available == 0
    assert _stock(product) == 5
    assert Order.objects.count() == 0


def test_unknown_owner(make_product):
    product = make_product(stock=5)

    with pytest.raises(OwnerNotFound):
        OrderPlacement().place(uuid.uuid4(), [{'product_id': product.pk, 'quantity': 1}])

    assert _stock(product) == 5


@pytest.mark.parametrize('items', [
    [],
    [{'product_id': '6f1c1f0e-0000-4000-8000-000000000000', 'quantity': 0}],
    [{'product_id': '6f1c1f0e-0000-4000-8000-000000000000', 'quantity': -2}],
])
def test_empty_order_or_non_positive_quantity_is_invalid(make_user, items):
    owner = make_user()

    with pytest.raises(InvalidOrder):
        OrderPlacement().place(owner.pk, items)


def test_malformed_product_id_is_invalid(make_user, make_product):
    owner = make_user()
    product = make_product(stock=5)

    with pytest.raises(InvalidOrder, match='not-a-uuid'):
        OrderPlacement().place(owner.pk, [
            {'product_id': product.pk, 'quantity': 1},
            {'product_id': 'not-a-uuid', 'quantity': 1},
        ])

    assert _stock(product) == 5
    assert Order.objects.count() == 0


def test_failure_between_decrements_rolls_back_everything(make_user, make_product, monkeypatch):
    owner = make_user()
    first = make_product(stock=10)
    second = make_product(stock=10)

    original = OrderPlacement._decrement
    calls = []

    def failing_decrement(self, product_id, quantity):
        calls.append(product_id)
        if len(calls) == 2:
            raise RuntimeError('connection lost')
        return original(self, product_id, quantity)

    monkeypatch.setattr(OrderPlacement, '_decrement', failing_decrement)

    with pytest.raises(RuntimeError):
        OrderPlacement().place(owner.pk, [
            {'product_id': first.pk, 'quantity': 4},
            {'product_id': second.pk, 'quantity': 4},
        ])

    assert len(calls) == 2
    assert Order.objects.count() == 0
    assert OrderItem.objects.count() == 0
    assert _stock(first) == 10
    assert _stock(second) == 10


def test_stale_snapshot_cannot_oversell(make_user, make_product):
    owner = make_user()
    product = make_product(stock=100)
    stale = {product.pk: Product.objects.get(pk=product.pk)}

    # another order took 60 after our snapshot was read
    Product.objects.filter(pk=product.pk).update(stock=40)

    class StaleSnapshotPlacement(OrderPlacement):
        def _snapshot(self, product_ids):
            return stale

    with pytest.raises(InsufficientStock) as excinfo:
        StaleSnapshotPlacement().place(owner.pk, [{'product_id': product.pk, 'quantity': 60}])

    assert excinfo.value.shortfalls[0].available == 40
    assert _stock(product) == 40
    assert Order.objects.count() == 0
    assert OrderItem.objects.count() == 0


def test_competing_orders_for_sixty_percent_each(make_user, make_product):
    product = make_product(stock=100)
    placement = OrderPlacement()

    placement.place(make_user().pk, [{'product_id': product.pk, 'quantity': 60}])
    with pytest.raises(InsufficientStock):
        placement.place(make_user().pk, [{'product_id': product.pk, 'quantity': 60}])

    assert _stock(product) == 40
    assert Order.objects.count() == 1


def test_aggregate_demand_sums_by_product():
    a = '11111111-1111-4111-8111-111111111111'
    b = '22222222-2222-4222-8222-222222222222'

    demand = aggregate_demand([
        {'product_id': a, 'quantity': 1},
        {'product_id': b, 'quantity': 2},
        {'product_id': a, 'quantity': 4},
    ])

    assert [(str(k), v) for k, v in demand.items()] == [(a, 5), (b, 2)]


def test_find_shortfalls_reports_missing_products_as_zero_available():
    missing = uuid.uuid4()
    shortfalls = find_shortfalls({missing: 1}, {})

    assert [(s.product_id, s.requested, s.available) for s in shortfalls] == [(missing, 1, 0)]
