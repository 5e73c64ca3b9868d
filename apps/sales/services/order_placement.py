import logging
import uuid

from django.db import transaction
from django.db.models import F
from django.utils import timezone

from apps.users.models import User
from ..exceptions import InsufficientStock, InvalidOrder, OwnerNotFound, StockShortfall, UnknownProduct
from ..models import Order, OrderItem, Product

logger = logging.getLogger(__name__)


def _as_uuid(value):
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value))
    except ValueError:
        raise InvalidOrder("Invalid product id: {}".format(value))


def aggregate_demand(items):
    """
    Map product id -> total requested quantity across all lines.

    Duplicate product ids are summed so the stock check sees the real demand.
    Insertion order follows the first occurrence of each product.
    """
    if not items:
        raise InvalidOrder()

    demand = {}
    for item in items:
        quantity = int(item['quantity'])
        if quantity <= 0:
            raise InvalidOrder("Quantity must be positive, got {}".format(quantity))
        product_id = _as_uuid(item['product_id'])
        demand[product_id] = demand.get(product_id, 0) + quantity
    return demand


def find_shortfalls(demand, products):
    """Compare aggregated demand with a product snapshot ({id: Product})."""
    shortfalls = []
    for product_id, requested in demand.items():
        product = products.get(product_id)
        available = product.stock if product is not None else 0
        if available < requested:
            shortfalls.append(StockShortfall(product_id, requested, available))
    return shortfalls


class OrderPlacement:
    """
    Places an order and takes its stock in one transaction.

    The snapshot read locks the product rows where the backend supports it,
    and every decrement is guarded with `stock >= quantity`, so a concurrent
    order that slipped in after the snapshot makes this one fail instead of
    driving stock negative.
    """

    def place(self, user_id, items):
        demand = aggregate_demand(items)

        with transaction.atomic():
            owner = self._get_owner(user_id)
            products = self._snapshot(demand.keys())

            missing = [pid for pid in demand if pid not in products]
            shortfalls = find_shortfalls(demand, products)
            if shortfalls:
                logger.info(
                    "ORDER REJECTED — user: %s | shortfalls: %s | missing: %d",
                    owner.pk, shortfalls, len(missing),
                )
                if missing:
                    raise UnknownProduct(shortfalls)
                raise InsufficientStock(shortfalls)

            order = self._apply(owner, items, demand, products)

        logger.info(
            "ORDER PLACED — id: %s | user: %s | lines: %d | products: %d",
            order.pk, owner.pk, len(items), len(demand),
        )
        return (
            Order.objects
            .prefetch_related('items__product')
            .get(pk=order.pk)
        )

    def _get_owner(self, user_id):
        try:
            return User.objects.get(pk=user_id)
        except User.DoesNotExist:
            raise OwnerNotFound()

    def _snapshot(self, product_ids):
        """Current stock for exactly the requested products, in one query."""
        queryset = (
            Product.objects
            .select_for_update()
            .filter(pk__in=list(product_ids))
            .order_by('pk')  # fixed lock order
        )
        return {product.pk: product for product in queryset}

    def _apply(self, owner, items, demand, products):
        order = Order.objects.create(user=owner)

        lines = []
        for item in items:
            product = products[_as_uuid(item['product_id'])]
            unit_price = item.get('unit_price')
            if unit_price is None:
                unit_price = product.price
            lines.append(OrderItem(
                order=order,
                product=product,
                quantity=int(item['quantity']),
                unit_price=unit_price,
            ))
        OrderItem.objects.bulk_create(lines)

        for product_id in sorted(demand, key=str):
            self._decrement(product_id, demand[product_id])

        return order

    def _decrement(self, product_id, quantity):
        updated = (
            Product.objects
            .filter(pk=product_id, stock__gte=quantity)
            .update(stock=F('stock') - quantity, updated_at=timezone.now())
        )
        if not updated:
            available = (
                Product.objects
                .filter(pk=product_id)
                .values_list('stock', flat=True)
                .first()
            )
            logger.warning(
                "STOCK RACE — product: %s | requested: %d | available: %s",
                product_id, quantity, available,
            )
            raise InsufficientStock([StockShortfall(product_id, quantity, available or 0)])