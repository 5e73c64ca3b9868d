import uuid
from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models


class Product(models.Model):
    """Products available for sale."""

    class Category(models.TextChoices):
        FASHION = 'FASHION', 'Fashion'
        BEAUTY = 'BEAUTY', 'Beauty'
        SPORTS = 'SPORTS', 'Sports'
        ELECTRONICS = 'ELECTRONICS', 'Electronics'
        HOME_INTERIOR = 'HOME_INTERIOR', 'Home interior'
        HOUSEHOLD_SUPPLIES = 'HOUSEHOLD_SUPPLIES', 'Household supplies'
        KITCHENWARE = 'KITCHENWARE', 'Kitchenware'

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=60)
    description = models.TextField(blank=True, default='')
    category = models.CharField(max_length=50, choices=Category.choices)
    price = models.DecimalField(max_digits=10, decimal_places=2, validators=[MinValueValidator(Decimal('0'))])
    stock = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'sales_product'
        indexes = [
            models.Index(fields=['category'], name='sales_product_category_idx'),
            models.Index(fields=['created_at'], name='sales_product_created_at_idx'),
            models.Index(fields=['price'], name='sales_product_price_idx'),
        ]

    def __str__(self):
        return self.name


class Order(models.Model):
    """Customer purchase orders."""

    class Status(models.TextChoices):
        PENDING = 'pending', 'Pending'
        COMPLETED = 'completed', 'Completed'
        CANCELLED = 'cancelled', 'Cancelled'

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey('users.User', on_delete=models.CASCADE, related_name='orders')
    status = models.CharField(max_length=20, choices=Status.choices, default=Status.PENDING)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'sales_order'
        indexes = [
            models.Index(fields=['status'], name='sales_order_status_idx'),
            models.Index(fields=['created_at'], name='sales_order_created_at_idx'),
        ]

    TERMINAL_STATUSES = (Status.COMPLETED, Status.CANCELLED)

    def __str__(self):
        return f"Order #{self.id} - {self.user_id}"

    @property
    def total(self):
        # Derived from the captured unit prices, never from the live product price.
        return sum((item.line_total for item in self.items.all()), Decimal('0'))


class OrderItem(models.Model):
    """Individual line items inside an order."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    order = models.ForeignKey(Order, on_delete=models.CASCADE, related_name='items')
    product = models.ForeignKey(Product, on_delete=models.PROTECT, related_name='order_items')
    quantity = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    unit_price = models.DecimalField(max_digits=10, decimal_places=2)

    class Meta:
        db_table = 'sales_order_item'
        indexes = [
            models.Index(fields=['order'], name='sales_orderitem_order_idx'),
            models.Index(fields=['product'], name='sales_orderitem_product_idx'),
        ]

    def __str__(self):
        return f"{self.product.name} x{self.quantity}"

    @property
    def line_total(self):
        return self.unit_price * self.quantity
