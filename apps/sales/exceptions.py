"""Order placement errors.

Raised by OrderPlacement when a request breaks a business rule. The API
exception handler turns them into client responses using `status_code`
and `payload()`.
"""

from apps.core.exceptions import StoreError


class StockShortfall:
    """One product whose requested quantity exceeds what is on hand."""

    def __init__(self, product_id, requested, available):
        self.product_id = product_id
        self.requested = requested
        self.available = available

    def as_dict(self):
        return {
            'productId': str(self.product_id),
            'requested': self.requested,
            'available': self.available,
        }

    def __repr__(self):
        return f"StockShortfall({self.product_id}, requested={self.requested}, available={self.available})"


class InvalidOrder(StoreError):
    """Empty order or a non-positive quantity."""

    default_message = 'Order must contain at least one item with a positive quantity'


class InsufficientStock(StoreError):
    """One or more products cannot cover the requested quantity."""

    default_message = 'Insufficient Stock'

    def __init__(self, shortfalls, message=None):
        self.shortfalls = list(shortfalls)
        super().__init__(message)

    def payload(self):
        return {
            'message': self.message,
            'shortfalls': [s.as_dict() for s in self.shortfalls],
        }


class UnknownProduct(InsufficientStock):
    """A requested product id does not resolve to a product."""

    default_message = 'Unknown product'


class OwnerNotFound(StoreError):
    status_code = 404
    default_message = 'Cannot find given user'
